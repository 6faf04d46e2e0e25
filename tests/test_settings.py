from blog_graph.core.config import DevSettings, ProdSettings, get_settings
from blog_graph.core.init_settings import resolve_args


def test_command_line_mode_and_address():
    args = resolve_args(["blog_graph/main.py", "--mode", "prod", "--host", "0.0.0.0", "--port", "9000"])
    assert args.mode == "prod"
    assert args.host == "0.0.0.0"
    assert args.port == 9000


def test_defaults(monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    args = resolve_args(["blog_graph/main.py"])
    assert (args.mode, args.host, args.port) == ("dev", "127.0.0.1", 8000)


def test_unknown_arguments_are_ignored():
    assert resolve_args(["blog_graph/main.py", "--reload"]).mode == "dev"


def test_host_program_uses_app_mode(monkeypatch):
    monkeypatch.setenv("APP_MODE", "prod")
    args = resolve_args(["/usr/bin/uvicorn", "blog_graph.main:app", "--port", "1"])
    assert args.mode == "prod"


def test_get_settings_by_mode():
    assert isinstance(get_settings("prod"), ProdSettings)
    assert isinstance(get_settings("dev"), DevSettings)
    assert get_settings("prod").GRAPHQL_IDE is False
    assert get_settings("dev").is_dev
