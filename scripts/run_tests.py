import sys
import pytest
from pathlib import Path
import datetime
import importlib.util

# Add project root to sys.path
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

TESTS_DIR = PROJECT_ROOT / 'tests'
OUTPUT_FILE = TESTS_DIR / 'latest_results.log'

# Distributions of the "test" extra that some tests skip without
TEST_EXTRA_MODULES = {"fitz": "PyMuPDF"}


class Tee(object):
    """Writes to several streams at once (console and log file)."""
    def __init__(self, *files):
        self.files = files

    def write(self, obj):
        for f in self.files:
            f.write(obj)
            f.flush()

    def flush(self):
        for f in self.files:
            f.flush()

    def isatty(self):
        return False


def missing_test_extras():
    return [dist for module, dist in TEST_EXTRA_MODULES.items() if importlib.util.find_spec(module) is None]


def run_tests_with_pytest(args):
    """
    Runs all tests using pytest and pipes output to tests/latest_results.log.
    """
    print("Running tests via Pytest...")
    print(f"Output will be saved to: {OUTPUT_FILE}")
    missing = missing_test_extras()
    if missing:
        print(f"Not installed: {', '.join(missing)} (pip install -e .[test]); PDF text checks will be skipped.")

    with open(OUTPUT_FILE, 'w', encoding='utf-8') as f:
        f.write(f"Test Run: {datetime.datetime.now()}\n")
        f.write("=" * 60 + "\n\n")
        f.flush()

        original_stdout = sys.stdout
        original_stderr = sys.stderr

        sys.stdout = Tee(sys.stdout, f)
        sys.stderr = Tee(sys.stderr, f)

        try:
            # Leave no .pytest_cache behind
            # '-ra' shows a summary of (r)easons for (a)ll except passed
            exit_code = pytest.main(["-v", "-ra", "-p", "no:cacheprovider", str(TESTS_DIR)] + args)
        finally:
            sys.stdout = original_stdout
            sys.stderr = original_stderr

        f.write("\n" + "=" * 60 + "\n")
        f.write(f"Run Completed. Exit Code: {exit_code}\n")

    return exit_code == 0


if __name__ == "__main__":
    # Extra arguments go to pytest, e.g. python scripts/run_tests.py -k "iframe"
    args = sys.argv[1:]

    # Filter out 'test' if it was passed by a make wrapper
    if args and args[0] == "test":
        args.pop(0)

    success = run_tests_with_pytest(args)
    sys.exit(0 if success else 1)
