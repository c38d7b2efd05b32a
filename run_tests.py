#!/usr/bin/env python3
"""
Main test runner for the MPPL scanner.

Runs a quick smoke scan of a sample program, then the unit test suite.
"""

import sys
import os
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, project_root)

SAMPLE_PROGRAM = """
program sample;
{ sum the numbers 1 .. 10 }
var i, total : integer;
begin
    i := 1; total := 0;
    while i <= 10 do
    begin
        total := total + i;  /* accumulate */
        i := i + 1
    end;
    writeln('total = ', total, ' isn''t bad')
end.
"""


def run_smoke_scan():
    """Scan the sample program and report what came out."""
    try:
        from mppl.lexer import Lexer, TokenKind
        print("✅ Lexer modules imported successfully")
    except ImportError as e:
        print(f"❌ Failed to import lexer modules: {e}")
        return False

    print("  🔧 Lexing sample program...")
    lexer = Lexer(SAMPLE_PROGRAM, "<sample>")
    tokens = lexer.tokenize()
    print(f"     Generated {len(tokens)} tokens")

    if lexer.has_errors() or lexer.has_warnings():
        print("     ❌ Unexpected diagnostics:")
        for diagnostic in lexer.get_diagnostics():
            print(f"        {diagnostic}")
        return False

    unknown = [t for t in tokens if t.kind is TokenKind.UNKNOWN]
    if unknown:
        print(f"     ❌ Unrecognized symbols: {unknown}")
        return False

    print("     ✅ Clean scan")
    print()
    return True


def run_all_tests():
    """Run the smoke scan and every unit test under tests/."""

    print("🚀 MPPL Scanner Test Suite")
    print("=" * 60)

    if not run_smoke_scan():
        return False

    suite = unittest.defaultTestLoader.discover(
        os.path.join(project_root, "tests"), top_level_dir=project_root
    )
    result = unittest.TextTestRunner(verbosity=2).run(suite)

    print()
    if result.wasSuccessful():
        print("🎉 All tests PASSED!")
    else:
        print(f"❌ {len(result.failures)} failures, {len(result.errors)} errors")
    return result.wasSuccessful()


if __name__ == "__main__":
    success = run_all_tests()
    sys.exit(0 if success else 1)
