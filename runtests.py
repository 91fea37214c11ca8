# -*- coding: utf-8 -*-
"""Run all tests for `gentools`.

Each test module in `gentools/test/` has a `test()` function of plain asserts.
This script imports and runs them all, and exits with a nonzero status if any
of them fails. The same modules can also be run with `pytest`.
"""

import os
import re
import sys
import traceback
from importlib import import_module

def listtestmodules(path):
    testfiles = listtestfiles(path)
    testmodules = [modname(path, fn) for fn in testfiles]
    return list(sorted(testmodules))

def listtestfiles(path, prefix="test_", suffix=".py"):
    return [fn for fn in os.listdir(path) if fn.startswith(prefix) and fn.endswith(suffix)]

def modname(path, filename):  # some/dir/mod.py --> some.dir.mod
    modpath = re.sub(re.escape(os.path.sep), r".", path)
    themod = re.sub(r"\.py$", r"", filename)
    return ".".join([modpath, themod])

def main():
    failed = []
    for m in listtestmodules(os.path.join("gentools", "test")):
        print(f"{m}: ", end="", flush=True)
        # Run each module separately, so that an ImportError or a failure in one
        # of them does not prevent the rest from running.
        try:
            mod = import_module(m)
            mod.test()
        except Exception:
            traceback.print_exc()
            failed.append(m)
    if failed:
        print(f"{len(failed)} test module(s) FAILED: {', '.join(failed)}")
    return not failed

if __name__ == '__main__':
    if not main():
        sys.exit(1)  # pragma: no cover, this only runs when the tests fail.
