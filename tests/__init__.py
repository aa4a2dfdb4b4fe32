"""
Unit Tests for Mailbox Chess

This package contains unit tests for all engine components.

Running Tests:
    # Run all tests
    pytest tests/

    # Run specific test file
    pytest tests/test_movegen.py

    # Run with coverage
    pytest tests/ --cov=mailbox_chess --cov-report=html

Dependencies:
    - pytest: Test framework
    - pytest-cov: Coverage reporting
"""
