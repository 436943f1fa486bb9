"""Tests for command parsing and the config command group."""

import pytest

from obcli.commands.accounts import AccountsCommand
from obcli.commands.base import BaseCommand
from obcli.commands.config import ConfigCommand
from obcli.core.errors import InvalidRequestError


@pytest.fixture
def accounts_cmd(config, configured_settings, api):
    return AccountsCommand(config, configured_settings, api)


@pytest.fixture
def config_cmd(config, settings):
    return ConfigCommand(config, settings)


class TestParseFlags:
    """Flag parsing shared by every command group."""

    def test_value_flags(self, accounts_cmd):
        flags, rest = accounts_cmd.parse_flags(["A1", "--from", "2024-01-01", "--to=2024-01-31"])
        assert flags == {"from": "2024-01-01", "to": "2024-01-31"}
        assert rest == ["A1"]

    def test_json_never_consumes_next_token(self, accounts_cmd):
        """--json is boolean even when a positional follows it."""
        flags, rest = accounts_cmd.parse_flags(["--json", "A1"])
        assert flags == {"json": True}
        assert rest == ["A1"]

    def test_trailing_value_flag_without_value(self, accounts_cmd):
        flags, _ = accounts_cmd.parse_flags(["--from"])
        assert flags == {"from": True}

    def test_dash_prefixed_id_is_positional(self, accounts_cmd):
        """Only known short flags are flags; an id like -1 stays positional."""
        flags, rest = accounts_cmd.parse_flags(["-1", "--json", "-x"])
        assert flags == {"json": True}
        assert rest == ["-1", "-x"]

    def test_short_help_flag(self, accounts_cmd):
        flags, rest = accounts_cmd.parse_flags(["-h", "A1"])
        assert flags == {"h": True}
        assert rest == ["A1"]


class TestDateRange:
    def test_absent_dates(self):
        assert BaseCommand.date_range({}) == {"from_date": None, "to_date": None}

    def test_dates_passed_through_verbatim(self):
        flags = {"from": "2024-01-01", "to": "2024-01-31T23:59:59Z"}
        assert BaseCommand.date_range(flags) == {
            "from_date": "2024-01-01",
            "to_date": "2024-01-31T23:59:59Z",
        }

    @pytest.mark.parametrize("bad", ["yesterday", "2024-13-01", "01/02/2024", True])
    def test_malformed_dates_rejected(self, bad):
        with pytest.raises(InvalidRequestError):
            BaseCommand.date_range({"from": bad})


class TestDispatch:
    """Action dispatch and argument checks."""

    def test_unknown_action(self, accounts_cmd, bank, capsys):
        assert accounts_cmd.execute(["delete", "A1"]) is False
        assert "Unknown action: accounts delete" in capsys.readouterr().err
        assert bank.requests == []

    def test_missing_positional(self, accounts_cmd, bank, capsys):
        """accounts get needs exactly one account id."""
        assert accounts_cmd.execute(["get"]) is False
        assert "Usage: openbanking accounts get <account-id>" in capsys.readouterr().err
        assert bank.requests == []

    def test_dash_prefixed_account_id(self, accounts_cmd, bank, capsys):
        bank.envelope("/accounts/-1", "Account", [{"AccountId": "-1"}])
        assert accounts_cmd.execute(["get", "-1"]) is True
        assert bank.last_request.url.path.endswith("/accounts/-1")

    def test_no_action_prints_usage(self, accounts_cmd, capsys):
        assert accounts_cmd.execute([]) is False
        err = capsys.readouterr().err
        assert "list" in err and "transactions" in err

    def test_help_flag(self, accounts_cmd, capsys):
        assert accounts_cmd.execute(["--help"]) is True

    def test_list_success(self, accounts_cmd, bank, sample_accounts, capsys):
        bank.envelope("/accounts", "Account", sample_accounts)
        assert accounts_cmd.execute(["list"]) is True
        out = capsys.readouterr().out
        assert "22289" in out and "Household" in out


class TestConfigSet:
    def test_set_token(self, config_cmd, settings, capsys):
        assert config_cmd.execute(["set", "--token", "abc"]) is True
        assert settings.get("accessToken") == "abc"
        assert "Access token set" in capsys.readouterr().out

    def test_set_expiry(self, config_cmd, settings):
        assert config_cmd.execute(["set", "--expiry", "1700000000000"]) is True
        assert settings.get("tokenExpiry") == 1_700_000_000_000

    def test_set_both(self, config_cmd, settings):
        assert config_cmd.execute(["set", "--token", "abc", "--expiry", "5"]) is True
        assert settings.get_all() == {"accessToken": "abc", "tokenExpiry": 5}

    def test_set_nothing_fails(self, config_cmd, capsys):
        assert config_cmd.execute(["set"]) is False
        assert "No options provided" in capsys.readouterr().err

    def test_bad_expiry_writes_nothing(self, config_cmd, settings, capsys):
        """A bad expiry rejects the whole set, token included."""
        assert config_cmd.execute(["set", "--token", "abc", "--expiry", "soon"]) is False
        assert settings.get("accessToken") == ""
        assert "Invalid --expiry" in capsys.readouterr().err

    def test_token_flag_without_value(self, config_cmd, settings):
        assert config_cmd.execute(["set", "--token"]) is False
        assert not settings.is_configured()


class TestConfigShowAndClear:
    def test_show_unset(self, config_cmd, capsys):
        assert config_cmd.execute(["show"]) is True
        out = capsys.readouterr().out
        assert "Access Token" in out
        assert "not set" in out

    def test_show_expired(self, config_cmd, settings, capsys):
        settings.set("accessToken", "abc")
        settings.set("tokenExpiry", 1000)
        assert config_cmd.execute(["show"]) is True
        out = capsys.readouterr().out
        assert "set" in out
        assert "expired (" in out

    def test_show_does_not_reveal_token(self, config_cmd, settings, capsys):
        settings.set("accessToken", "super-secret-token")
        config_cmd.execute(["show"])
        assert "super-secret-token" not in capsys.readouterr().out

    def test_clear(self, config_cmd, settings, capsys):
        settings.set("accessToken", "abc")
        assert config_cmd.execute(["clear"]) is True
        assert not settings.is_configured()
        assert "Configuration cleared" in capsys.readouterr().out
