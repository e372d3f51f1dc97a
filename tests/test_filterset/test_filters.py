"""Tests for filter kinds."""

from datetime import date

import pytest

from src.filterset import (
    BooleanFilter,
    CheckBoxesFilter,
    Condition,
    DateFilter,
    Filter,
    RadioButtonsFilter,
    SelectFilter,
    TextFilter,
    UnknownFilterKindError,
    filter_class,
    parameterize,
)


class TestParameterize:
    """Tests for deriving filter names from labels."""

    @pytest.mark.parametrize("label,name", [
        ("Customer Name", "customer_name"),
        ("Commercial?", "commercial"),
        ("Never had Job of Type", "never_had_job_of_type"),
        ("  Multi--Space  Label ", "multi_space_label"),
        ("Café Owner", "cafe_owner"),
        ("already_snake", "already_snake"),
    ])
    def test_names(self, label, name):
        """Test name derivation."""
        assert parameterize(label) == name

    def test_filter_name_from_label(self):
        """Test that filters take their name from their label."""
        f = TextFilter("Customer Name", "customers.name")

        assert f.name == "customer_name"
        assert f.label == "Customer Name"
        assert f.field == "customers.name"


class TestFilterBase:
    """Tests for behaviour shared by all filters."""

    def test_reset_restores_options(self):
        """Test reset restores active/operator/value."""
        f = TextFilter("Name", "name", active=True, operator="is", value="Jones")
        f.active = False
        f.operator = "blank"
        f.value = "Smith"
        f.validate()

        f.reset()

        assert f.active is True
        assert f.operator == "is"
        assert f.value == "Jones"
        assert f.condition is None
        assert f.error is None

    def test_reset_is_idempotent(self):
        """Test resetting twice gives the same state."""
        f = SelectFilter("Type", "type", value=["a"])
        f.reset()
        first = (f.active, f.operator, f.value)
        f.reset()

        assert (f.active, f.operator, f.value) == first

    def test_reset_copies_list_defaults(self):
        """Test mutating the value does not change the default."""
        f = SelectFilter("Type", "type", value=["a"])
        f.value.append("b")
        f.reset()

        assert f.value == ["a"]

    def test_reset_set_default(self):
        """Test a set default becomes a sorted list copy."""
        default = {"3", "1"}
        f = CheckBoxesFilter("Job", "job", value=default)
        f.value.append("2")
        f.reset()

        assert f.value == ["1", "3"]
        assert default == {"3", "1"}

    def test_set_value_condition_order(self):
        """Test set values give sorted params."""
        f = SelectFilter("Type", "type", value={"Lead", "Customer", "Prospect"})
        f.validate()

        assert f.condition == Condition("type IN (?, ?, ?)", ["Customer", "Lead", "Prospect"])

    def test_base_validate_reports_error(self):
        """Test the abstract filter reports missing validation as an error."""
        f = Filter("Thing", "thing")
        f.validate()

        assert f.condition is None
        assert "No validation implemented" in f.error

    def test_operator_label(self):
        """Test operator display text."""
        f = TextFilter("Name", "name")

        assert f.operator_label("does_not_contain") == "does not contain"

    def test_stringified_choices(self):
        """Test choices are stringified with pairs kept."""
        f = CheckBoxesFilter("Job", "job", choices=[["HVAC", "1"], ["Electrical", 2]])

        assert f.stringified_choices() == [["HVAC", "1"], ["Electrical", "2"]]


class TestTextFilter:
    """Tests for TextFilter."""

    def test_operators(self):
        """Test operator vocabulary and default."""
        f = TextFilter("Name", "name")

        assert f.operators() == ["is", "is_not", "contains", "does_not_contain", "starts_with", "blank"]
        assert f.operator == "contains"

    def test_whitespace_is_missing(self):
        """Test whitespace-only value with contains."""
        f = TextFilter("Name", "name", operator="contains", value="  ")
        f.validate()

        assert f.error == "please enter a value"
        assert f.condition is None

    def test_none_is_missing(self):
        """Test no value at all."""
        f = TextFilter("Name", "name")
        f.validate()

        assert f.error == "please enter a value"

    @pytest.mark.parametrize("operator,sql,param", [
        ("is", "name = ?", "Acme"),
        ("is_not", "name <> ?", "Acme"),
        ("contains", "name LIKE ?", "%Acme%"),
        ("does_not_contain", "name NOT LIKE ?", "%Acme%"),
        ("starts_with", "name LIKE ?", "Acme%"),
    ])
    def test_conditions(self, operator, sql, param):
        """Test the condition built for each operator."""
        f = TextFilter("Name", "name", operator=operator, value=" Acme ")
        f.validate()

        assert f.error is None
        assert f.condition == Condition(sql, [param])

    def test_blank_ignores_value(self):
        """Test blank operator needs no value."""
        f = TextFilter("Name", "name", operator="blank")
        f.validate()

        assert f.error is None
        assert f.condition == Condition("name IS NULL")

    def test_normalize_value(self):
        """Test submitted values become a string."""
        f = TextFilter("Name", "name")

        assert f.normalize_value(None) == ""
        assert f.normalize_value(["Acme", "other"]) == "Acme"
        assert f.normalize_value(42) == "42"


class TestChoiceFilters:
    """Tests for SelectFilter, CheckBoxesFilter and RadioButtonsFilter."""

    @pytest.mark.parametrize("cls", [SelectFilter, CheckBoxesFilter, RadioButtonsFilter])
    def test_operators(self, cls):
        """Test the shared operator vocabulary."""
        f = cls("Type", "type")

        assert f.operators() == ["is", "is_not", "blank"]
        assert f.operator == "is"

    @pytest.mark.parametrize("cls", [SelectFilter, CheckBoxesFilter, RadioButtonsFilter])
    @pytest.mark.parametrize("value", [None, [], "", "   ", [""], ["", "  "]])
    def test_missing_value(self, cls, value):
        """Test missing selections are rejected."""
        f = cls("Type", "type", value=value)
        f.validate()

        assert f.error == "Please select a value"
        assert f.condition is None

    @pytest.mark.parametrize("cls", [SelectFilter, CheckBoxesFilter, RadioButtonsFilter])
    def test_blank_ignores_value(self, cls):
        """Test blank operator regardless of value."""
        f = cls("Type", "type", operator="blank", value=[])
        f.validate()

        assert f.error is None
        assert f.condition == Condition("type IS NULL")

    def test_select_in(self):
        """Test IN condition for several values."""
        f = SelectFilter("Type", "type", value=["Customer", "Lead"])
        f.validate()

        assert f.condition == Condition("type IN (?, ?)", ["Customer", "Lead"])

    def test_select_not_in_scalar(self):
        """Test a scalar value is treated as a one-item set."""
        f = SelectFilter("Type", "type", operator="is_not", value="Customer")
        f.validate()

        assert f.condition == Condition("type NOT IN (?)", ["Customer"])

    def test_check_boxes(self):
        """Test check boxes behave like select."""
        f = CheckBoxesFilter("Job", "job", value=["1", "3"])
        f.validate()

        assert f.condition == Condition("job IN (?, ?)", ["1", "3"])

    def test_radio_buttons(self):
        """Test radio buttons with a single value."""
        f = RadioButtonsFilter("Sex", "sex", value="m")
        f.validate()

        assert f.condition == Condition("sex IN (?)", ["m"])

    def test_normalize_values(self):
        """Test value shapes per kind."""
        assert SelectFilter("T", "t").normalize_value("a") == ["a"]
        assert SelectFilter("T", "t").normalize_value(None) is None
        assert CheckBoxesFilter("T", "t").normalize_value(["1", 2]) == ["1", "2"]
        assert RadioButtonsFilter("T", "t").normalize_value(["m"]) == "m"
        assert RadioButtonsFilter("T", "t").normalize_value("f") == "f"

    def test_select_describe(self):
        """Test render state for a select."""
        f = SelectFilter("Type", "type", choices=["Customer", "Lead"], value=["Lead"])
        data = f.describe()

        assert data["kind"] == "select"
        assert data["choices"] == [
            {"label": "Customer", "value": "Customer"},
            {"label": "Lead", "value": "Lead"},
        ]
        assert data["multiple"] is False
        assert data["size"] == 1
        assert {"value": "is_not", "label": "is not"} in data["operators"]

    def test_select_describe_multiple(self):
        """Test multi-select size is capped."""
        f = SelectFilter("Code", "code", choices=[str(n) for n in range(10)])
        data = f.describe()

        assert data["multiple"] is True
        assert data["size"] == 7


class TestDateFilter:
    """Tests for DateFilter."""

    def test_operators(self):
        """Test operator vocabulary."""
        f = DateFilter("Since", "since")

        assert f.operators() == ["is", "on_or_after", "on_or_before", "between", "blank"]

    def test_default_state_is_invalid(self):
        """Test reset then validate with the default operator."""
        f = DateFilter("Since", "since")
        f.reset()
        f.validate()

        assert f.operator == "is"
        assert f.error == "please enter a date"

    def test_invalid_first_date(self):
        """Test unparseable first date."""
        f = DateFilter("Since", "since", value=["not a date"])
        f.validate()

        assert f.error == "date is invalid"
        assert f.condition is None

    def test_impossible_date(self):
        """Test a date that does not exist on the calendar."""
        f = DateFilter("Since", "since", value=["2024-02-30"])
        f.validate()

        assert f.error == "date is invalid"

    @pytest.mark.parametrize("operator,sql", [
        ("is", "since = ?"),
        ("on_or_after", "since >= ?"),
        ("on_or_before", "since <= ?"),
    ])
    def test_single_date_conditions(self, operator, sql):
        """Test single-date operators."""
        f = DateFilter("Since", "since", operator=operator, value=["01/15/2024"])
        f.validate()

        assert f.error is None
        assert f.condition == Condition(sql, [date(2024, 1, 15)])

    def test_scalar_value(self):
        """Test a plain string value."""
        f = DateFilter("Since", "since", value="2024-01-15")
        f.validate()

        assert f.condition == Condition("since = ?", [date(2024, 1, 15)])

    def test_between(self):
        """Test a valid range."""
        f = DateFilter("Since", "since", operator="between", value=["2024-01-01", "2024-01-10"])
        f.validate()

        assert f.error is None
        assert f.condition == Condition("since BETWEEN ? AND ?", [date(2024, 1, 1), date(2024, 1, 10)])

    def test_between_same_day(self):
        """Test a one-day range is allowed."""
        f = DateFilter("Since", "since", operator="between", value=["2024-01-01", "2024-01-01"])
        f.validate()

        assert f.error is None

    def test_between_reversed(self):
        """Test the second date must not precede the first."""
        f = DateFilter("Since", "since", operator="between", value=["2024-01-10", "2024-01-01"])
        f.validate()

        assert f.error == "second date cannot be earlier than first date"
        assert f.condition is None

    def test_between_missing_second_date(self):
        """Test a missing second date is reported as invalid."""
        f = DateFilter("Since", "since", operator="between", value=["2024-01-10"])
        f.validate()

        assert f.error == "second date is invalid"

    def test_between_invalid_second_date(self):
        """Test unparseable second date."""
        f = DateFilter("Since", "since", operator="between", value=["2024-01-10", "soon"])
        f.validate()

        assert f.error == "second date is invalid"

    def test_between_missing_first_date(self):
        """Test the first date is still required for a range."""
        f = DateFilter("Since", "since", operator="between", value=["", "2024-01-10"])
        f.validate()

        assert f.error == "please enter a date"

    def test_blank(self):
        """Test blank operator ignores values."""
        f = DateFilter("Since", "since", operator="blank", value=["garbage"])
        f.validate()

        assert f.error is None
        assert f.condition == Condition("since IS NULL")

    def test_native_dates_accepted(self):
        """Test date objects set directly."""
        f = DateFilter("Since", "since", operator="on_or_before", value=[date(2024, 3, 1)])
        f.validate()

        assert f.condition == Condition("since <= ?", [date(2024, 3, 1)])

    def test_year_window_option(self):
        """Test the two-digit-year window is taken from the options."""
        f = DateFilter("Since", "since", value=["01/01/50"], year_window=0)
        f.validate()

        assert f.condition.params[0].year < date.today().year

    def test_normalize_value(self):
        """Test values become at most two strings."""
        f = DateFilter("Since", "since")

        assert f.normalize_value("2024-01-01") == ["2024-01-01"]
        assert f.normalize_value(["a", "b", "c"]) == ["a", "b"]
        assert f.normalize_value(None) is None


class TestBooleanFilter:
    """Tests for BooleanFilter."""

    def test_operators(self):
        """Test vocabulary with and without blank."""
        assert BooleanFilter("Commercial?", "commercial").operators() == ["yes", "no"]
        assert BooleanFilter("Commercial?", "commercial", allow_blank=True).operators() == ["yes", "no", "blank"]

    @pytest.mark.parametrize("operator,sql", [
        ("yes", "commercial"),
        ("no", "NOT commercial"),
        ("blank", "commercial IS NULL"),
    ])
    def test_conditions(self, operator, sql):
        """Test the condition for each operator."""
        f = BooleanFilter("Commercial?", "commercial", operator=operator, allow_blank=True)
        f.validate()

        assert f.error is None
        assert f.condition == Condition(sql)

    def test_reset_then_validate_is_valid(self):
        """Test the default state is valid."""
        f = BooleanFilter("Commercial?", "commercial")
        f.reset()
        f.validate()

        assert f.error is None
        assert f.condition == Condition("commercial")

    def test_value_ignored(self):
        """Test submitted values are dropped."""
        assert BooleanFilter("Commercial?", "commercial").normalize_value("yes") is None


class TestFilterClass:
    """Tests for the kind registry."""

    @pytest.mark.parametrize("kind,cls", [
        ("text", TextFilter),
        ("select", SelectFilter),
        ("check_boxes", CheckBoxesFilter),
        ("radio_buttons", RadioButtonsFilter),
        ("date", DateFilter),
        ("boolean", BooleanFilter),
    ])
    def test_known_kinds(self, kind, cls):
        """Test built-in kinds resolve."""
        assert filter_class(kind) is cls

    def test_unknown_kind(self):
        """Test unknown kinds fail at lookup."""
        with pytest.raises(UnknownFilterKindError) as exc_info:
            filter_class("slider")

        assert exc_info.value.kind == "slider"
        assert "text" in exc_info.value.known
