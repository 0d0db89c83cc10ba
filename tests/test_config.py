import pytest

from naver_search.config import load_credentials
from naver_search.errors import MissingCredentialsError
from naver_search.models import Credentials


def test_loads_both_variables():
    env = {"NAVER_CLIENT_ID": "abc", "NAVER_CLIENT_SECRET": "xyz"}
    assert load_credentials(env) == Credentials("abc", "xyz")


def test_reads_process_environment_by_default(monkeypatch):
    monkeypatch.setenv("NAVER_CLIENT_ID", "from-env")
    monkeypatch.setenv("NAVER_CLIENT_SECRET", "secret")
    assert load_credentials().client_id == "from-env"


@pytest.mark.parametrize("env, missing", [
    ({}, ["NAVER_CLIENT_ID", "NAVER_CLIENT_SECRET"]),
    ({"NAVER_CLIENT_ID": "abc"}, ["NAVER_CLIENT_SECRET"]),
    ({"NAVER_CLIENT_ID": "  ", "NAVER_CLIENT_SECRET": "xyz"}, ["NAVER_CLIENT_ID"]),
])
def test_missing_or_blank_values_are_fatal(env, missing):
    with pytest.raises(MissingCredentialsError) as exc_info:
        load_credentials(env)
    assert exc_info.value.missing == missing


def test_main_exits_without_credentials(monkeypatch):
    from naver_tools import __main__ as main

    monkeypatch.delenv("NAVER_CLIENT_ID", raising=False)
    monkeypatch.delenv("NAVER_CLIENT_SECRET", raising=False)
    monkeypatch.setattr(main, "load_dotenv", lambda: False)

    with pytest.raises(SystemExit) as exc_info:
        main.main()
    assert exc_info.value.code == 1
