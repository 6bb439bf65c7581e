"""
Fixture suites: load feed fixtures and check their statistics.

Suite definitions (expected values per fixture) live in a YAML file read
with OmegaConf:

    suites:
      dogs:
        fixture: dogs.json
        expectations:
          image_count: 20
          alpha_numeric_tags: [...]
          non_alpha_numeric_tags: {mode: head, value: świnoujście}
          avg_title_length: 26
          common_tag: {rank: 2, word: puppy}
          oldest_photo_title: "20160626_P1060675"

Usage:
    from photostats.contexts.harness import run_fixture_suites, exit_code

    results = run_fixture_suites(Path("data/fixtures/dogs.json"),
                                 Path("data/fixtures/landscapes.json"))
    sys.exit(exit_code(results))
"""

import os
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from dotenv import load_dotenv
from omegaconf import OmegaConf

from photostats.contexts.analysis import (
    alpha_numeric_tags_uniq,
    avg_title_length,
    common_tag_by_rank,
    image_count,
    non_alpha_numeric_tags,
    oldest_photo_title,
)
from photostats.contexts.extraction.loader import load_dataset
from photostats.contexts.harness.assertions import Assertion, SuiteResult, run_assertions
from photostats.contexts.harness.logger import _log_info, log_suite_result
from photostats.utils.rounding import round_half_up

load_dotenv()
FIXTURE_SUITES_PATH = Path(os.getenv("FIXTURE_SUITES_PATH", "config/fixture_suites.yaml"))

NON_ALPHA_MODES = ("head", "all")


def load_suite_config(config_path: Path = None) -> Dict[str, Dict[str, Any]]:
    """
    Load suite definitions keyed by suite name.

    Args:
        config_path: Optional YAML path (defaults to FIXTURE_SUITES_PATH env variable)

    Returns:
        Plain dict: {suite_name: {"fixture": ..., "expectations": {...}}}

    Raises:
        ValueError: If the file has no `suites` mapping
    """
    if config_path is None:
        config_path = FIXTURE_SUITES_PATH

    config = OmegaConf.to_container(OmegaConf.load(config_path), resolve=True)

    if not isinstance(config, dict) or not isinstance(config.get("suites"), dict):
        raise ValueError(f"Suite config {config_path} must contain a 'suites' mapping")

    return config["suites"]


def build_fixture_assertions(
    name: str, dataset: Any, expectations: Mapping[str, Any]
) -> List[Assertion]:
    """
    Build the ordered assertion list for one fixture.

    Actual values are computed here, so extraction errors propagate to the
    caller before any assertion is checked.

    Args:
        name: Suite name used in assertion descriptions
        dataset: Decoded fixture
        expectations: Expected values (see module docstring)

    Raises:
        ValueError: If non_alpha_numeric_tags.mode is not "head" or "all"
    """
    non_alpha = expectations["non_alpha_numeric_tags"]
    mode = non_alpha.get("mode", "all")
    if mode not in NON_ALPHA_MODES:
        raise ValueError(f"Unknown non_alpha_numeric_tags mode '{mode}'. Use one of {NON_ALPHA_MODES}")

    non_alpha_actual = non_alpha_numeric_tags(dataset)
    if mode == "head":
        non_alpha_actual = non_alpha_actual[0] if non_alpha_actual else None
        non_alpha_name = f"Should only be 1 non alphanumeric tag as {non_alpha['value']!r}"
    else:
        non_alpha_name = f"Non alphanumeric tags should be {non_alpha['value']!r}"

    common_tag = expectations["common_tag"]
    rank = common_tag["rank"]

    return [
        Assertion(f"Is {name} an object?", isinstance(dataset, dict), True),
        Assertion(
            f"Images count should be {expectations['image_count']}",
            image_count(dataset),
            expectations["image_count"],
        ),
        Assertion(
            "Should get all unique alphanumeric tags after transforming to lower case, "
            "sorted lexicographically",
            alpha_numeric_tags_uniq(dataset),
            sorted(expectations["alpha_numeric_tags"]),
        ),
        Assertion(non_alpha_name, non_alpha_actual, non_alpha["value"]),
        Assertion(
            f"Average title length should be {expectations['avg_title_length']} (rounded)",
            round_half_up(avg_title_length(dataset)),
            expectations["avg_title_length"],
        ),
        Assertion(
            f"Tag at rank {rank} should be {common_tag['word']!r} (0 is most common)",
            common_tag_by_rank(rank, dataset),
            common_tag["word"],
        ),
        Assertion(
            f"Oldest photo title should be {expectations['oldest_photo_title']!r}",
            oldest_photo_title(dataset),
            expectations["oldest_photo_title"],
        ),
    ]


def run_suite(name: str, fixture_path: Path, expectations: Mapping[str, Any]) -> SuiteResult:
    """Load one fixture, check its assertions and log the outcomes."""
    _log_info(f"Running suite '{name}' against {fixture_path}")
    dataset = load_dataset(fixture_path)
    outcomes = run_assertions(build_fixture_assertions(name, dataset, expectations))
    result = SuiteResult(name=name, outcomes=outcomes)
    log_suite_result(result)
    return result


def run_suites(
    fixture_paths: Mapping[str, Path], config_path: Optional[Path] = None
) -> List[SuiteResult]:
    """
    Run configured suites against the given fixture files.

    Args:
        fixture_paths: Suite name -> fixture file
        config_path: Optional suite config (defaults to FIXTURE_SUITES_PATH)

    Returns:
        One SuiteResult per entry of fixture_paths, in the same order

    Raises:
        KeyError: If a suite name has no configured expectations
    """
    suites = load_suite_config(config_path)

    results = []
    for name, fixture_path in fixture_paths.items():
        if name not in suites:
            raise KeyError(f"No suite named '{name}' in suite config. Available: {list(suites)}")
        results.append(run_suite(name, Path(fixture_path), suites[name]["expectations"]))
    return results


def run_fixture_suites(
    dogs_path: Path, landscapes_path: Path, config_path: Optional[Path] = None
) -> List[SuiteResult]:
    """
    Run the dogs and landscapes suites.

    Args:
        dogs_path: Dogs fixture file
        landscapes_path: Landscapes fixture file
        config_path: Optional suite config (defaults to FIXTURE_SUITES_PATH)

    Returns:
        [dogs result, landscapes result]
    """
    return run_suites({"dogs": dogs_path, "landscapes": landscapes_path}, config_path)


def default_fixture_paths(fixtures_dir: Path, config_path: Optional[Path] = None) -> Dict[str, Path]:
    """Resolve each configured suite's `fixture` file name against fixtures_dir."""
    suites = load_suite_config(config_path)
    return {name: fixtures_dir / suite["fixture"] for name, suite in suites.items()}
