"""
Service layer for glive.

- grml_live: the grml-live build step
- changelist: the changelog build step
- launcher: running commands as subprocesses
- logging: internal diagnostics
"""
