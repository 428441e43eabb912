"""
Services module for board business logic.

- sync: provider adapters, game matching and the board orchestrator
"""
