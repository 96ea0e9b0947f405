import pytest

from mx_ids_api.app import create_app

# Valid identifiers; check characters computed by hand from the value tables.
VALID_CURPS = [
    "GODE561231HDFRRN00",  # 1956-12-31, digit century marker
    "PEMA040229MJCRRNA5",  # 2004-02-29, letter century marker
    "LOPA000229HDFPRBA6",  # 2000-02-29, leap year only in the 2000s
]

VALID_RFCS = [
    "GODE561231GR8",  # individual
    "ABC680524P70",  # organization, dv == 11 -> '0'
    "ABC680524PDA",  # organization, dv == 10 -> 'A'
    "ABC680524P89",  # organization, plain digit
    "ABC000229P76",  # 2000-02-29
    "A&C680524P70",  # '&' shares the value of 'Ñ'
]


@pytest.fixture
def app():
    flask_app = create_app(api_prefix="/api", max_batch_size=10)
    flask_app.config["TESTING"] = True
    return flask_app


@pytest.fixture
def api_client(app):
    return app.test_client()
