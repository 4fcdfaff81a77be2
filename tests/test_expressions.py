import pytest

from algobox.expressions import (
    count_keys,
    evaluate_postfix,
    infix_to_postfix,
    is_balanced,
    is_palindrome,
    remove_k_duplicates,
    reverse_string,
)


def test_evaluate_postfix_worked_example():
    assert evaluate_postfix("235*+") == 17


def test_evaluate_postfix_single_operand():
    assert evaluate_postfix("7") == 7


def test_subtraction_operand_order():
    assert evaluate_postfix("93-") == -evaluate_postfix("39-")


def test_division_truncates_toward_zero():
    assert evaluate_postfix("07-2/") == -evaluate_postfix("72/")


@pytest.mark.parametrize("expression", ["+", "2+", "2a+", "23", ""])
def test_evaluate_postfix_malformed(expression):
    with pytest.raises(ValueError):
        evaluate_postfix(expression)


def test_evaluate_postfix_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        evaluate_postfix("50/")


def test_infix_to_postfix_precedence():
    assert infix_to_postfix("a+b*c") == "a b c * +"


def test_infix_to_postfix_left_associative():
    assert infix_to_postfix("a-b-c") == "a b - c -"


def test_infix_to_postfix_then_evaluate():
    postfix = infix_to_postfix("2+3*5").replace(" ", "")
    assert evaluate_postfix(postfix) == 17
    assert evaluate_postfix(infix_to_postfix("2*3+5").replace(" ", "")) == evaluate_postfix(
        "23*5+"
    )


def test_infix_parentheses_change_grouping():
    grouped = infix_to_postfix("(2+3)*5").replace(" ", "")
    assert grouped == "23+5*"


@pytest.mark.parametrize("expression", ["(a+b", "a+b)", "a%b"])
def test_infix_to_postfix_errors(expression):
    with pytest.raises(ValueError):
        infix_to_postfix(expression)


def test_is_balanced_source_example():
    assert is_balanced("[4-6]((8){(9-8)})") is True


@pytest.mark.parametrize("text", ["(]", "((", ")", "{[}]"])
def test_is_balanced_rejects(text):
    assert is_balanced(text) is False


def test_is_palindrome():
    assert is_palindrome("Madam") is True
    assert is_palindrome("abc") is False
    assert is_palindrome("") is True


def test_reverse_string():
    assert reverse_string("abc") == "cba"
    assert reverse_string(reverse_string("hello world")) == "hello world"


def test_remove_k_duplicates():
    assert remove_k_duplicates("abc", 2) == "abc"
    assert remove_k_duplicates("aabb", 2) == ""
    assert remove_k_duplicates("abba", 2) == ""


def test_remove_k_duplicates_rejects_nonpositive_k():
    with pytest.raises(ValueError):
        remove_k_duplicates("aa", 0)


def test_count_keys():
    names = ["Ann", "Bob", "Ann", "ann"]
    counts = count_keys(names)
    assert counts["Ann"] == names.count("Ann")
    assert counts["ann"] == names.count("ann")
    assert sum(counts.values()) == len(names)
    assert list(counts) == ["Ann", "Bob", "ann"]