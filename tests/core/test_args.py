# tests/core/test_args.py
"""Tests for `--key value` argument parsing."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from snouty.contracts import InvalidArgumentsError
from snouty.core.args import parse_args, split_integration_key

# Up to three dotted segments: never matches the four-segment integration form
flat_keys = st.from_regex(
    r"[a-z][a-z0-9_]{0,8}(\.[a-z][a-z0-9_]{0,8}){0,2}", fullmatch=True
)


class TestParseArgs:
    """Flat key parsing."""

    def test_simple_pairs(self) -> None:
        params = parse_args(["--a", "1", "--b", "2"])

        assert params.to_wire() == {"a": "1", "b": "2"}

    def test_dotted_keys_are_flat(self) -> None:
        params = parse_args(
            [
                "--antithesis.duration",
                "30",
                "--antithesis.description",
                "test run",
            ]
        )

        assert params["antithesis.duration"] == "30"
        assert params["antithesis.description"] == "test run"

    def test_values_are_kept_as_strings(self) -> None:
        """No numeric or boolean coercion at parse time."""
        params = parse_args(["--count", "42", "--enabled", "true", "--ratio", "3.14"])

        assert params["count"] == "42"
        assert params["enabled"] == "true"
        assert params["ratio"] == "3.14"

    def test_value_may_look_like_a_flag(self) -> None:
        params = parse_args(["--a", "--b"])

        assert params.to_wire() == {"a": "--b"}

    def test_empty_value_is_allowed(self) -> None:
        params = parse_args(["--antithesis.description", ""])

        assert params["antithesis.description"] == ""

    def test_later_value_wins(self) -> None:
        params = parse_args(["--a", "1", "--a", "2"])

        assert params.to_wire() == {"a": "2"}

    def test_no_tokens_gives_empty_set(self) -> None:
        assert len(parse_args([])) == 0

    @given(values=st.dictionaries(flat_keys, st.text(), max_size=10))
    def test_one_entry_per_key_with_verbatim_value(
        self, values: dict[str, str]
    ) -> None:
        tokens: list[str] = []
        for key, value in values.items():
            tokens.extend([f"--{key}", value])

        assert parse_args(tokens).to_wire() == values


class TestParseArgsErrors:
    """Malformed token sequences."""

    def test_missing_value(self) -> None:
        with pytest.raises(InvalidArgumentsError, match="missing value for --a"):
            parse_args(["--a"])

    def test_missing_flag_marker(self) -> None:
        with pytest.raises(InvalidArgumentsError, match="unexpected argument: x"):
            parse_args(["x", "1"])

    def test_single_dash_is_not_a_flag(self) -> None:
        with pytest.raises(InvalidArgumentsError, match="unexpected argument"):
            parse_args(["-a", "1"])

    def test_empty_key(self) -> None:
        with pytest.raises(InvalidArgumentsError, match="empty key"):
            parse_args(["--", "1"])

    def test_error_message_has_prefix(self) -> None:
        with pytest.raises(InvalidArgumentsError) as exc_info:
            parse_args(["--antithesis.duration"])

        assert str(exc_info.value) == (
            "invalid arguments: missing value for --antithesis.duration"
        )


class TestIntegrationGrouping:
    """`<ns>.integrations.<provider>.<field>` keys are grouped per provider."""

    def test_fields_grouped_under_provider(self) -> None:
        params = parse_args(
            [
                "--ns.integrations.gh.token",
                "t",
                "--ns.integrations.gh.url",
                "u",
            ]
        )

        assert params.to_wire() == {"ns.integrations.gh": {"token": "t", "url": "u"}}

    def test_providers_are_separate_blocks(self) -> None:
        params = parse_args(
            [
                "--antithesis.integrations.github.token",
                "secret",
                "--antithesis.integrations.slack.callback_url",
                "https://hooks.example.com",
                "--antithesis.duration",
                "30",
            ]
        )

        assert params.to_wire() == {
            "antithesis.integrations.github": {"token": "secret"},
            "antithesis.integrations.slack": {
                "callback_url": "https://hooks.example.com"
            },
            "antithesis.duration": "30",
        }

    def test_block_key_alone_stays_flat(self) -> None:
        params = parse_args(["--antithesis.integrations.github", "x"])

        assert params.to_wire() == {"antithesis.integrations.github": "x"}

    def test_deeper_keys_stay_flat(self) -> None:
        params = parse_args(["--antithesis.integrations.github.a.b", "x"])

        assert params.to_wire() == {"antithesis.integrations.github.a.b": "x"}


class TestSplitIntegrationKey:
    def test_matches_integration_field(self) -> None:
        assert split_integration_key("antithesis.integrations.github.token") == (
            "antithesis.integrations.github",
            "token",
        )

    def test_rejects_other_keys(self) -> None:
        assert split_integration_key("antithesis.duration") is None
        assert split_integration_key("antithesis.integrations.github") is None
        assert split_integration_key("my.integrations") is None
