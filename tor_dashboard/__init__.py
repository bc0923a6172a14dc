"""
TOR Activity Dashboard: sheet ingestion and aggregation backend

Turns the published CSV export of the daily activity form into
period-scoped statistics, year-over-year trends and a monthly timeline.

To change the source sheet:
    Set the TOR_CSV_URL environment variable, or pass `url=` to the
    dashboard.fetch_* functions. Any export with a DD/MM/YYYY timestamp in
    the first column and the registry's header wording will resolve.

To connect to Streamlit:
    Call dashboard.fetch_productivity(start, end) to get a plain dict with
    drug and seizure cards, boletim counts, summary counters and timeline.

To add a new counter:
    Add an entry to config.FIELD_REGISTRY mapping its key to a header
    substring and fallback column, then reference the key from one of the
    display tables in config.
"""
