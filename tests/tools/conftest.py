from pathlib import Path

import pytest

HEADER = (
    "Ticker,Market Capitalization (B),P/E Ratio,ROE (%),Debt-to-Equity,"
    "Dividend Yield (%),Revenue Growth (%),EPS Growth (%),Current Ratio,Gross Margin (%)"
)

ROWS = [
    "KO,260,24,40,1.6,3.1,6,4,1.1,60",
    "XOM,450,12,18,0.2,3.4,-2,-10,1.4,30",
    "NVDA,3000,55,90,0.4,0.03,120,150,4,75",
    "VZ,170,9,20,1.9,6.5,0.5,1,0.7,58",
    "JNJ,380,15,22,0.5,3,4,5,1.2,68",
]


@pytest.fixture()
def sample_data_dir(tmp_path: Path) -> Path:
    (tmp_path / "stocks.csv").write_text("\n".join([HEADER, *ROWS]) + "\n")
    return tmp_path
