import pook as pook_mod
import pytest

from aocutils.cookies import load_security_properties


@pytest.fixture
def aocu_data_dir(tmp_path):
    data_dir = tmp_path / ".config" / "aocu-data"
    data_dir.mkdir(parents=True)
    return data_dir


@pytest.fixture
def aocu_config_dir(tmp_path):
    config_dir = tmp_path / ".config" / "aocu-config"
    config_dir.mkdir(parents=True)
    return config_dir


@pytest.fixture
def resources(tmp_path):
    resource_dir = tmp_path / "resources"
    resource_dir.mkdir()
    return resource_dir


@pytest.fixture(autouse=True)
def remove_user_env(aocu_data_dir, aocu_config_dir, resources, monkeypatch):
    monkeypatch.setattr("aocutils.models.AOCU_DATA_DIR", aocu_data_dir)
    monkeypatch.setattr("aocutils.models.AOCU_CONFIG_DIR", aocu_config_dir)
    monkeypatch.setattr("aocutils.cookies.AOCU_CONFIG_DIR", aocu_config_dir)
    monkeypatch.setattr("aocutils.get.RESOURCE_DIRS", [resources])
    monkeypatch.setattr("aocutils.cookies.RESOURCE_DIRS", [resources])
    monkeypatch.delenv("AOC_SESSION", raising=False)
    load_security_properties.cache_clear()
    yield
    load_security_properties.cache_clear()


@pytest.fixture(autouse=True)
def test_token(aocu_config_dir):
    properties = aocu_config_dir / "security.properties"
    properties.write_text("aoc.session=thetesttoken\n")
    return properties


@pytest.fixture
def pook():
    pook_mod.on()
    yield pook_mod
    pook_mod.off()
    pook_mod.reset()
