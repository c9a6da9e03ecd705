import io

import pandas as pd
import pytest

from data_compare import ComparisonSession, Side


@pytest.fixture
def session() -> ComparisonSession:
    return ComparisonSession()


@pytest.fixture
def loaded_session(session) -> ComparisonSession:
    """Session holding the array scenario: [1,2,3] vs [1,5,3,4]."""
    session.set_input(Side.LEFT, "[1, 2, 3]")
    session.set_input(Side.RIGHT, "[1, 5, 3, 4]")
    return session


@pytest.fixture
def xlsx_bytes() -> bytes:
    """Small workbook: header row plus two data rows on the first sheet."""
    buffer = io.BytesIO()
    df = pd.DataFrame({"id": [1, 2], "name": ["alpha", "beta"]})
    df.to_excel(buffer, index=False)
    return buffer.getvalue()
