"""NBA Live Board API."""
