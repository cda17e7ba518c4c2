"""플러그인 래퍼 테스트"""

from pathlib import Path
from unittest.mock import Mock

import pytest

from monorepo_commits.commit_filtering.commit_filter import CommitFilter
from monorepo_commits.plugin import map_commits, with_only_package_commits


@pytest.mark.unit
class TestMapCommits:
    """map_commits 테스트"""

    def test_replaces_only_commits(self):
        context = {"commits": [1, 2, 3], "branch": "main"}
        new_context = map_commits(lambda commits: commits[:1])(context)

        assert new_context == {"commits": [1], "branch": "main"}
        assert context["commits"] == [1, 2, 3]

    def test_missing_commits(self):
        assert map_commits(lambda commits: commits)({})["commits"] == []


@pytest.mark.unit
class TestWithOnlyPackageCommits:
    """with_only_package_commits 테스트"""

    @pytest.fixture
    def client(self, monorepo: Path, fake_git_client):
        return fake_git_client(monorepo, {
            "a": ["packages/core/index.js"],
            "b": ["packages/utils/index.js"],
        })

    def test_plugin_receives_filtered_commits(self, monorepo: Path, client):
        plugin_step = Mock(return_value="minor")
        logger = Mock()
        wrapped = with_only_package_commits(
            plugin_step,
            lambda: CommitFilter(git_client=client, cwd=str(monorepo / "packages" / "core"))
        )
        context = {
            "commits": [
                {"hash": "a", "subject": "feat: core", "body": ""},
                {"hash": "b", "subject": "fix: utils", "body": ""},
            ],
            "logger": logger,
        }

        assert wrapped({"preset": "angular"}, context) == "minor"

        plugin_config, new_context = plugin_step.call_args.args
        assert plugin_config == {"preset": "angular"}
        assert new_context["commits"] == [
            {"hash": "a", "subject": "feat: core", "body": "", "files": ["packages/core/index.js"]}
        ]
        assert new_context["logger"] is logger
        assert len(context["commits"]) == 2
        logger.info.assert_called_once_with(
            "Found %s commits for package %s since last release", 1, "@scope/core"
        )

    def test_default_factory_reuses_cache_between_calls(self, monorepo: Path, client, monkeypatch):
        monkeypatch.chdir(monorepo / "packages" / "core")
        monkeypatch.setattr("monorepo_commits.commit_filtering.commit_filter.GitClient",
                            lambda **kwargs: client)
        wrapped = with_only_package_commits(Mock())
        context = {"commits": [{"hash": "a", "subject": "feat: core"}], "logger": Mock()}

        wrapped({}, context)
        wrapped({}, context)

        client.get_commit_files.assert_called_once_with("a")

    def test_default_factory_builds_filter_with_shared_cache(self, monorepo: Path, client, monkeypatch):
        created = []
        monkeypatch.chdir(monorepo / "packages" / "core")
        monkeypatch.setattr("monorepo_commits.commit_filtering.commit_filter.GitClient",
                            lambda **kwargs: client)
        monkeypatch.setattr("monorepo_commits.plugin.CommitFilter",
                            lambda **kwargs: created.append(kwargs) or CommitFilter(**kwargs))
        wrapped = with_only_package_commits(Mock())
        context = {"commits": [], "logger": Mock()}

        wrapped({}, context)
        wrapped({}, context)

        assert len(created) == 2
        assert created[0]["cache"] is created[1]["cache"]
