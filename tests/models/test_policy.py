"""Tests for Policy and PolicyViolation Pydantic models."""
import pytest
from pydantic import ValidationError

from manylicenses.models.config import ManyLicensesConfig
from manylicenses.models.policy import Policy, PolicyViolation, split_option_values


class TestSplitOptionValues:
    """Tests for split_option_values function."""

    def test_splits_commas(self) -> None:
        """Test comma-separated values are split."""
        assert split_option_values(["MIT,ISC"]) == ["MIT", "ISC"]

    def test_flattens_repeated_values(self) -> None:
        """Test repeated option values are concatenated in order."""
        assert split_option_values(["MIT", "ISC,Apache-2.0"]) == [
            "MIT",
            "ISC",
            "Apache-2.0",
        ]

    def test_drops_empty_items(self) -> None:
        """Test trailing or doubled commas do not produce empty values."""
        assert split_option_values(["MIT,,ISC,", ""]) == ["MIT", "ISC"]


class TestPolicy:
    """Tests for Policy accessors."""

    def test_defaults(self) -> None:
        """Test default policy verifies and approves nothing."""
        policy = Policy()

        assert policy.requires_verification() is True
        assert policy.approved_licenses == frozenset()
        assert policy.excluded_names == frozenset()
        assert policy.excluded_prefixes == ()

    def test_is_approved_exact_match(self) -> None:
        """Test approval matching is exact and case-sensitive."""
        policy = Policy(approved_licenses=frozenset({"MIT"}))

        assert policy.is_approved("MIT") is True
        assert policy.is_approved("mit") is False
        assert policy.is_approved("") is False

    def test_is_excluded_by_name(self) -> None:
        """Test exclusion by exact name."""
        policy = Policy(excluded_names=frozenset({"left-pad"}))

        assert policy.is_excluded("left-pad") is True
        assert policy.is_excluded("left-pad-extra") is False

    def test_is_excluded_by_prefix(self) -> None:
        """Test exclusion by name prefix."""
        policy = Policy(excluded_prefixes=("@internal/", "acme-"))

        assert policy.is_excluded("@internal/utils") is True
        assert policy.is_excluded("acme-widgets") is True
        assert policy.is_excluded("react") is False

    def test_requires_verification_follows_flag(self) -> None:
        """Test requires_verification mirrors the verify flag."""
        assert Policy(verify=False).requires_verification() is False

    def test_policy_is_immutable(self) -> None:
        """Test that the policy cannot be modified after construction."""
        policy = Policy()

        with pytest.raises(ValidationError):
            policy.verify = False  # type: ignore[misc]

    def test_extra_fields_forbidden(self) -> None:
        """Test that unknown fields are rejected."""
        with pytest.raises(ValidationError):
            Policy(approved=["MIT"])  # type: ignore[call-arg]


class TestPolicyFromSources:
    """Tests for Policy.from_sources."""

    def test_command_line_only(self) -> None:
        """Test building from command-line values."""
        policy = Policy.from_sources(
            approve=("MIT,ISC",),
            exclude=("a", "b"),
            exclude_prefix=("@scope/",),
        )

        assert policy.approved_licenses == frozenset({"MIT", "ISC"})
        assert policy.excluded_names == frozenset({"a", "b"})
        assert policy.excluded_prefixes == ("@scope/",)
        assert policy.verify is True

    def test_merges_config_values(self) -> None:
        """Test configuration values are added to command-line values."""
        config = ManyLicensesConfig(
            approve=["Apache-2.0"],
            exclude=["c"],
            exclude_prefix=["@other/", "@scope/"],
        )

        policy = Policy.from_sources(
            approve=("MIT",),
            exclude_prefix=("@scope/",),
            config=config,
        )

        assert policy.approved_licenses == frozenset({"MIT", "Apache-2.0"})
        assert policy.excluded_names == frozenset({"c"})
        assert policy.excluded_prefixes == ("@scope/", "@other/")

    def test_no_verify(self) -> None:
        """Test the verify flag is carried over."""
        assert Policy.from_sources(verify=False).requires_verification() is False

    def test_default_config_adds_nothing(self) -> None:
        """Test an all-None configuration leaves the policy unchanged."""
        policy = Policy.from_sources(approve=("MIT",), config=ManyLicensesConfig())

        assert policy.approved_licenses == frozenset({"MIT"})
        assert policy.excluded_names == frozenset()


class TestPolicyViolation:
    """Tests for PolicyViolation model."""

    def test_describe(self) -> None:
        """Test the one-line description names package and license."""
        violation = PolicyViolation(name="b", version="2.0.0", license_id="GPL-3.0")

        assert violation.describe() == '"b@2.0.0" has unapproved license: "GPL-3.0"'

    def test_defaults_empty(self) -> None:
        """Test version and license default to empty strings."""
        violation = PolicyViolation(name="b")

        assert violation.version == ""
        assert violation.license_id == ""

    def test_missing_name_raises_error(self) -> None:
        """Test that name is required."""
        with pytest.raises(ValidationError) as exc_info:
            PolicyViolation(version="1.0.0")  # type: ignore[call-arg]

        assert "name" in str(exc_info.value)
