"""Pytest configuration and shared fixtures."""

import pytest


@pytest.fixture
def sample_review():
    return "The item broke after one use and support never replied."


@pytest.fixture
def well_formed_reply():
    return (
        "Sentiment: Negative\n"
        "Emotions: frustration, disappointment\n"
        "Main Issue: Product broke quickly and support was unresponsive\n"
        "Customer Wants: A replacement or refund and faster support response"
    )
