import pytest

from seealso_client import cli
from seealso_client.response import normalize


def test_parse_args_render_with_services() -> None:
    args = cli.parse_args(
        ["render", "--input", "in.html", "--output", "out.html", "--service", "isbn=http://s/"]
    )
    assert args.service == ["isbn=http://s/"]
    assert args.view == []


def test_parse_args_render_requires_service() -> None:
    with pytest.raises(SystemExit):
        cli.parse_args(["render", "--input", "in.html", "--output", "out.html"])


def test_parse_args_requires_command() -> None:
    with pytest.raises(SystemExit):
        cli.parse_args([])


def test_namespace_to_config_reads_services_file(tmp_path) -> None:
    services = tmp_path / "services.txt"
    services.write_text("# registry\nwiki=http://s/wiki\n", encoding="utf-8")
    args = cli.parse_args(
        [
            "render",
            "--input",
            "in.html",
            "--output",
            "out.html",
            "--service",
            "isbn=http://s/isbn",
            "--services-file",
            str(services),
            "--view",
            "list=list",
        ]
    )
    config = cli.namespace_to_config(args)
    assert config.services == (("isbn", "http://s/isbn"), ("wiki", "http://s/wiki"))
    assert config.views == (("list", "list"),)
    assert config.request_timeout is None


def test_main_render_returns_zero_on_success(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(cli, "run_pipeline", lambda config, logger: config.output)
    argv = ["render", "--input", "in.html", "--output", "out.html", "--service", "isbn=http://s/"]
    assert cli.main(argv) == 0


def test_main_returns_two_on_invalid_config() -> None:
    argv = ["render", "--input", "a", "--output", "b", "--service", "isbn=ftp://s/"]
    assert cli.main(argv) == 2
    assert cli.main(["lookup", "x", "--service", "http://s/", "--max-items", "-1"]) == 2


def test_main_lookup_prints_wire(monkeypatch: pytest.MonkeyPatch, capsys) -> None:
    result = normalize(["x", ["L"], ["D"], ["U"]])
    monkeypatch.setattr(cli, "run_lookup", lambda config, identifier, logger: (result, "<a/>"))
    assert cli.main(["lookup", "x", "--service", "http://s/", "--wire", "--callback", "cb"]) == 0
    assert capsys.readouterr().out.strip() == 'cb(["x",["L"],["D"],["U"]]);'


def test_main_lookup_prints_html(monkeypatch: pytest.MonkeyPatch, capsys) -> None:
    monkeypatch.setattr(
        cli, "run_lookup", lambda config, identifier, logger: (normalize(identifier), "none")
    )
    assert cli.main(["lookup", "x", "--service", "http://s/"]) == 0
    assert capsys.readouterr().out.strip() == "none"
