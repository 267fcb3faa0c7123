import os

import pytest

from jummahfinder.core import env


@pytest.fixture
def fresh_env(monkeypatch):
    for name in [env.ROOT_ENV, env.ENV_FILE_ENV]:
        monkeypatch.delenv(name, raising=False)
    env.get_project_root.cache_clear()
    env.load_dotenv_if_present.cache_clear()
    yield monkeypatch
    env.get_project_root.cache_clear()
    env.load_dotenv_if_present.cache_clear()


def test_relative_paths_resolve_against_project_root(fresh_env, tmp_path):
    fresh_env.setenv(env.ROOT_ENV, str(tmp_path))

    assert env.get_project_root() == tmp_path.resolve()
    assert env.resolve_project_path("data/masjids.json") == tmp_path.resolve() / "data" / "masjids.json"
    assert env.resolve_project_path(tmp_path / "abs.json") == tmp_path / "abs.json"


def test_root_is_found_by_walking_up_to_a_marker(fresh_env, tmp_path):
    (tmp_path / "pyproject.toml").write_text("", encoding="utf-8")
    nested = tmp_path / "scripts" / "deep"
    nested.mkdir(parents=True)
    fresh_env.chdir(nested)

    assert env.get_project_root() == tmp_path.resolve()


def test_env_file_is_loaded_without_overriding(fresh_env, tmp_path):
    for name in ["JUMMAHFINDER_TEST_FROM_FILE", "JUMMAHFINDER_TEST_PRESET"]:
        fresh_env.setenv(name, "placeholder")
        fresh_env.delenv(name)
    env_file = tmp_path / "local.env"
    env_file.write_text(
        "JUMMAHFINDER_TEST_FROM_FILE=loaded\nJUMMAHFINDER_TEST_PRESET=from-file\n", encoding="utf-8"
    )
    fresh_env.setenv(env.ENV_FILE_ENV, str(env_file))
    fresh_env.setenv("JUMMAHFINDER_TEST_PRESET", "from-process")

    assert env.load_dotenv_if_present() == env_file.resolve()
    assert os.environ["JUMMAHFINDER_TEST_FROM_FILE"] == "loaded"
    assert os.environ["JUMMAHFINDER_TEST_PRESET"] == "from-process"
    assert env.get_project_root() == tmp_path.resolve()


def test_missing_env_file_is_skipped(fresh_env, tmp_path):
    fresh_env.setenv(env.ENV_FILE_ENV, str(tmp_path / "absent.env"))
    assert env.load_dotenv_if_present() is None
