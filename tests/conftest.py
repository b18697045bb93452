"""Pytest configuration and shared fixtures."""

import pytest


@pytest.fixture
def login_email():
    return (
        "From: john@company.com\n"
        "Subject: Can't login to my account\n"
        "\n"
        "I've been locked out of my account for 2 hours. "
        "I need access urgently for a client meeting."
    )


@pytest.fixture
def plain_email():
    return "hello there, just checking in"


@pytest.fixture
def signed_email():
    return (
        "From: Jane Roe <jane.roe@example.org>\n"
        "To: helpdesk@example.org\n"
        "Subject: Printer on floor 3\n"
        "\n"
        "The printer keeps showing a paper jam and the toner light is on.\n"
        "-- \n"
        "John Doe\n"
        "CEO"
    )
