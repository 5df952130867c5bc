from pathlib import Path

import pytest

from buste_paga.shared_modules.config import Config, DEFAULT_TEMPLATE_DIR


def test_loads_sections_with_defaults(config, tmp_path):
    assert config.project_root == tmp_path.resolve()
    assert config.output_dir == tmp_path.resolve() / "output"
    assert config.template_dir == DEFAULT_TEMPLATE_DIR
    assert config.payroll.daily_ordinary_minutes_cap == 480
    assert config.columns.start_day == "GIORNO INIZIO"
    assert config.formatting.currency == "EUR"
    assert config.month_name("3") == "Marzo"
    assert config.month_name("13") == "13"


def test_is_singleton(config_file):
    assert Config(config_file) is Config(config_file)


def test_default_config_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    config = Config()

    assert config.templates.pay_slip_template == "busta_paga.html.j2"
    assert config.project_root == tmp_path.resolve()
    assert (tmp_path / ".logs" / "buste_paga.log").exists()


def test_get_with_dotted_key(config):
    assert config.get("logging.log_level") == "DEBUG"
    assert config.get("payroll.mileage_rate_per_km", 0.37) == 0.37
    assert config.get("structure.nope.deeper", "x") == "x"


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        Config(tmp_path / "manca.yaml")


def test_missing_project_root_raises(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        f'structure:\n  prj_root: "{(tmp_path / "manca").as_posix()}"\nlogging:\n  log_file: null\n',
        encoding="utf-8",
    )
    with pytest.raises(FileNotFoundError):
        Config(path)


def test_missing_template_raises(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        f'structure:\n  prj_root: "{tmp_path.as_posix()}"\n  template_path: "tpl"\nlogging:\n  log_file: null\n',
        encoding="utf-8",
    )
    (tmp_path / "tpl").mkdir()
    with pytest.raises(FileNotFoundError):
        Config(path)


def test_incomplete_month_names_raise(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        f'structure:\n  prj_root: "{tmp_path.as_posix()}"\nlogging:\n  log_file: null\nmonths:\n  1: "Gennaio"\n',
        encoding="utf-8",
    )
    with pytest.raises(ValueError, match="12"):
        Config(path)


def test_numeric_month_keys_are_padded(tmp_path):
    months = "\n".join(f"  {m}: \"M{m}\"" for m in range(1, 13))
    path = tmp_path / "config.yaml"
    path.write_text(
        f'structure:\n  prj_root: "{tmp_path.as_posix()}"\nlogging:\n  log_file: null\nmonths:\n{months}\n',
        encoding="utf-8",
    )

    assert Config(path).month_name("03") == "M3"


def test_custom_template_dir(tmp_path):
    tpl_dir = tmp_path / "tpl"
    tpl_dir.mkdir()
    (tpl_dir / "mia.html.j2").write_text("{{ employee_name }}", encoding="utf-8")
    path = tmp_path / "config.yaml"
    path.write_text(
        f'structure:\n  prj_root: "{tmp_path.as_posix()}"\n  template_path: "tpl"\n'
        'logging:\n  log_file: null\ntemplates:\n  pay_slip_template: "mia.html.j2"\n',
        encoding="utf-8",
    )

    assert Config(path).template_dir == Path(tpl_dir).resolve()
