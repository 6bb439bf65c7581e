"""
Extraction Context

Responsibilities:
- Loads photo feed JSON documents
- Extracts title, tags and date_taken fields in item order
- Defines the error taxonomy shared by all contexts

Owns: Dataset access and field lookup
Never: Computes statistics
"""
