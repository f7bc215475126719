"""Tests for the multisig-deploy command line."""

from typing import Any

from click.testing import CliRunner

from multisig_deploy.cli.main import cli

from .test_utils import KEY_HASHES, TREASURY, script_address, write_config


class TestCli:
    def setup_method(self, method: Any) -> None:
        self.runner = CliRunner()

    def test_validate_valid_config(self, tmp_path) -> None:
        path = write_config(tmp_path, TREASURY)

        result = self.runner.invoke(cli, ["validate", "--config", str(path)])

        assert result.exit_code == 0, result.output
        assert "Treasury" in result.output
        assert "2 of 3" in result.output

    def test_validate_rejected_config(self, tmp_path) -> None:
        path = write_config(tmp_path, {**TREASURY, "members": ["0xA1", "0xA1"]})

        result = self.runner.invoke(cli, ["validate", "--config", str(path)])

        assert result.exit_code == 1
        assert "Duplicate member address: 0xA1" in result.output

    def test_validate_with_evm_format(self, tmp_path) -> None:
        path = write_config(tmp_path, TREASURY)

        result = self.runner.invoke(
            cli, ["validate", "--config", str(path), "--format", "evm"]
        )

        assert result.exit_code == 1
        assert "Malformed address" in result.output

    def test_validate_missing_file(self, tmp_path) -> None:
        result = self.runner.invoke(
            cli, ["validate", "--config", str(tmp_path / "nope.json")]
        )

        assert result.exit_code == 1
        assert "Config file not found" in result.output

    def test_show_flags_missing_fields(self, tmp_path) -> None:
        path = write_config(tmp_path, {"name": "Treasury", "members": ["0xA1"]})

        result = self.runner.invoke(cli, ["show", "--config", str(path)])

        assert result.exit_code == 0, result.output
        assert "<missing>" in result.output
        assert "'Treasury'" in result.output

    def test_deploy_derives_script_address(self, tmp_path) -> None:
        path = write_config(
            tmp_path,
            {"name": "Council", "members": KEY_HASHES, "threshold": 2},
            filename="council.yaml",
        )

        result = self.runner.invoke(
            cli, ["deploy", "--config", str(path), "--yes"]
        )

        assert result.exit_code == 0, result.output
        assert "Script Address" in result.output
        assert "addr_test1" in result.output

    def test_deploy_declined(self, tmp_path) -> None:
        path = write_config(
            tmp_path, {"name": "Council", "members": KEY_HASHES, "threshold": 2}
        )

        result = self.runner.invoke(
            cli, ["deploy", "--config", str(path)], input="n\n"
        )

        assert result.exit_code == 0
        assert "aborted" in result.output
        assert "Script Address" not in result.output

    def test_deploy_rejects_non_cardano_members(self, tmp_path) -> None:
        path = write_config(tmp_path, TREASURY)

        result = self.runner.invoke(
            cli, ["deploy", "--config", str(path), "--yes"]
        )

        assert result.exit_code == 1
        assert "Malformed address" in result.output

    def test_deploy_rejects_script_member_before_prompt(self, tmp_path) -> None:
        members = [KEY_HASHES[0], script_address("44" * 28)]
        path = write_config(
            tmp_path, {"name": "Council", "members": members, "threshold": 1}
        )

        result = self.runner.invoke(cli, ["deploy", "--config", str(path)])

        assert result.exit_code == 1
        assert "Malformed address" in result.output
        assert "Proceed with these wallet parameters?" not in result.output
