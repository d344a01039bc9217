#!/usr/bin/env python3
from pygedit.main import main

if __name__ == "__main__":
    raise SystemExit(main())
