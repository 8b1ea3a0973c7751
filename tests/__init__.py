"""
Unit Tests for chess_guess

Running Tests:
    # Run all tests
    pytest tests/

    # Run specific test file
    pytest tests/test_points.py

    # Run with coverage
    pytest tests/ --cov=chess_guess --cov-report=html

Dependencies:
    - pytest: Test framework
    - pytest-cov: Coverage reporting
"""
