"""
Board sync layer between API-Sports (live games) and The Odds API (moneylines).

Key components:
- Adapters: Fetch raw records from each provider
- Matchers: Index odds by matchup and extract moneylines
- Utils: Team name normalization and score extraction
- Orchestrator: Fetch both providers and merge the board
"""
