"""Declarative chart configuration for the linked pie and drilldown charts.

The rendering engine is driven by option dicts built here rather than by
imperative drawing calls. This package contains the option schema, the
builders, the replay-latest state cells and the selection pipeline that
re-derives both charts whenever the selection changes.
"""
