"""Course Notes RAG client - upload notes, ask questions, get sourced answers.

Drives a remote retrieval-augmented-generation service over HTTP and keeps
the session state for a NiceGUI front end.

Components:
    - client: Typed HTTP access to the ingest, query and reset endpoints
    - controller: Session state and operation orchestration
    - ui: Web page rendering controller snapshots
    - models: Request, response and state schemas
"""

__version__ = "0.1.0"
