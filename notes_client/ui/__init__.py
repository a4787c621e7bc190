"""NiceGUI interface - thin presentation layer over the controller.

Responsibilities:
    - File selection and ingest/reset controls
    - Question and Top K entry
    - Answer, error and source excerpt display

Contains no business logic. Renders controller snapshots and forwards
user intents to the controller.
"""
