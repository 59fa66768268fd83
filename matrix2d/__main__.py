
import sys
import unittest
from pathlib import Path


def run_tests():
    # The test modules live next to the installed package, so discovery
    # works from any working directory.
    start_dir = Path(__file__).parent / 't'
    loader = unittest.TestLoader()
    suite = loader.discover(
        str(start_dir), top_level_dir=str(start_dir.parent.parent)
    )

    runner = unittest.TextTestRunner(verbosity=0)
    result = runner.run(suite)

    # Non-zero exit status on failure for CI pipelines.
    sys.exit(not result.wasSuccessful())


if __name__ == '__main__':
    if len(sys.argv) > 1 and sys.argv[1] == 'test':
        run_tests()
    else:
        print("Unknown command.")
        print("Usage: python -m matrix2d test")
