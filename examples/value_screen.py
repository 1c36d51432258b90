"""Value screen — end-to-end query example.

Screen: dividend payers trading below 20x earnings with modest leverage,
largest companies first.

Usage:
    # Put the exported sheet at ~/.screenq/data/stocks.csv (or set SCREENQ_DATA_DIR)
    python examples/value_screen.py
"""

from screenq.core import Field, ScreenRequest, SortState
from screenq.data import LocalDatasetProvider
from screenq.query import EXAMPLE_QUERY, format_condition
from screenq.screen import run_screen

# ── Request ──────────────────────────────────────────────────────────────

request = ScreenRequest(
    query=EXAMPLE_QUERY,
    sort=SortState(field=Field.MARKET_CAP, direction="desc"),
    page=1,
    page_size=10,
)

# ── Run Screen ───────────────────────────────────────────────────────────

records = LocalDatasetProvider().get_records("stocks")
result = run_screen(records, request)

# ── Results ──────────────────────────────────────────────────────────────

print("=" * 60)
print("Query:")
for condition in result.conditions:
    print(f"  {format_condition(condition)}")
for diag in result.diagnostics:
    print(f"  ! line {diag.line_number}: {diag.message}")
print("=" * 60)
print(
    f"{result.total} results found. "
    f"Showing page {result.page.number} of {result.page.page_count}"
)
print()

if result.page.records:
    print(f"{'#':>3}  {'Name':<8} {'Mkt Cap':>9} {'P/E':>7} {'Div %':>6} {'D/E':>6}")
    print("-" * 60)
    for offset, r in enumerate(result.page.records):
        print(
            f"{result.page.start_index + offset:>3}  {r.name:<8} "
            f"{r.market_cap:>9.2f} {r.pe:>7.2f} {r.div_yield:>6.2f} {r.debt_to_equity:>6.2f}"
        )
