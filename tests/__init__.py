"""Test suite for deckscrub.

This package contains all automated tests for the deckscrub application,
organized to mirror the source code structure.

Running Tests:
    pytest                                  # Run all tests
    pytest -v                               # Verbose output
    pytest tests/test_off_canvas.py         # Run specific file
    pytest -k "flush"                       # Run tests with matching pattern in function name

The GUI tests use pytest-qt; on a machine without a display they run
against Qt's offscreen platform.

Notes:
    - Decks are built in memory with python-pptx (see tests/helpers.py), so
      there are no binary fixture files to keep in sync.
    - Monkeypatch for changing values (sys.argv, env vars)
    - Mock/patch for spying on function calls and faking behavior
"""
