"""Chart configuration layer: datasets, settings, builders and the selection pipeline."""
