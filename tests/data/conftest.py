from pathlib import Path

import pytest

SAMPLE_CSV = """Ticker,Market Capitalization (B),P/E Ratio,ROE (%),Debt-to-Equity,Dividend Yield (%),Revenue Growth (%),EPS Growth (%),Current Ratio,Gross Margin (%)
AAPL,"3,400.5",33.1,160.0,1.8,0.4,2.0,10.5,0.9,46.2
,1.0,1.0,1.0,1.0,1.0,1.0,1.0,1.0,1.0
KO,260,24,40,1.6,3.1,6,4,1.1,60

MSFT,3100,n/a,35,0.3,,15,20,1.3,69
"""


@pytest.fixture()
def sample_csv() -> str:
    """Sheet export with a thousands separator, a ticker-less row, a blank line and bad cells."""
    return SAMPLE_CSV


@pytest.fixture()
def sample_data_dir(tmp_path: Path, sample_csv: str) -> Path:
    """Create a tmp dir with a sample stocks.csv file."""
    (tmp_path / "stocks.csv").write_text(sample_csv)
    return tmp_path
