from api_learn.utils.validators import (
    collect_errors,
    validate_body,
    validate_title,
    validate_user_id,
)


def test_validate_title():
    assert validate_title("") == "Title is required"
    assert validate_title("   ") == "Title is required"
    assert validate_title(None) == "Title is required"
    assert validate_title("Hi") is None
    assert validate_title("Hi", min_length=3) == "Title must be at least 3 characters"
    assert validate_title("Hey", min_length=3) is None


def test_validate_body_requires_min_length():
    assert validate_body("") == "Body is required"
    assert validate_body("too short") == "Body must be at least 10 characters"
    assert validate_body("long enough body") is None


def test_validate_user_id():
    assert validate_user_id("") == "User ID is required"
    assert validate_user_id("abc") == "User ID must be a number"
    assert validate_user_id("0") == "User ID must be between 1 and 10"
    assert validate_user_id("11") == "User ID must be between 1 and 10"
    assert validate_user_id(" 3 ") is None


def test_collect_errors_drops_empty_messages():
    assert collect_errors(title=None, body="Body is required") == {
        "body": "Body is required"
    }
