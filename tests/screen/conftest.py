import pytest

from screenq.core.types import Record


@pytest.fixture()
def sample_records() -> list[Record]:
    """Five stocks with distinct value/quality profiles."""
    return [
        Record(id=1, name="KO", market_cap=260.0, pe=24.0, roe=40.0, debt_to_equity=1.6,
               div_yield=3.1, revenue_growth=6.0, eps_growth=4.0, current_ratio=1.1,
               gross_margin=60.0),
        Record(id=2, name="XOM", market_cap=450.0, pe=12.0, roe=18.0, debt_to_equity=0.2,
               div_yield=3.4, revenue_growth=-2.0, eps_growth=-10.0, current_ratio=1.4,
               gross_margin=30.0),
        Record(id=3, name="NVDA", market_cap=3000.0, pe=55.0, roe=90.0, debt_to_equity=0.4,
               div_yield=0.03, revenue_growth=120.0, eps_growth=150.0, current_ratio=4.0,
               gross_margin=75.0),
        Record(id=4, name="VZ", market_cap=170.0, pe=9.0, roe=20.0, debt_to_equity=1.9,
               div_yield=6.5, revenue_growth=0.5, eps_growth=1.0, current_ratio=0.7,
               gross_margin=58.0),
        Record(id=5, name="JNJ", market_cap=380.0, pe=15.0, roe=22.0, debt_to_equity=0.5,
               div_yield=3.0, revenue_growth=4.0, eps_growth=5.0, current_ratio=1.2,
               gross_margin=68.0),
    ]


@pytest.fixture()
def numbered_records() -> list[Record]:
    """r1..r25 with market cap equal to the id."""
    return [Record(id=i, name=f"S{i:02d}", market_cap=float(i)) for i in range(1, 26)]
