#!/usr/bin/env python3
"""Drop simulation runner.

This is the main entry point for running a headless drop simulation.
The engine code is in the dropsim/ directory.

Usage:
  python3 run.py --scenario Earth --height 5
  python3 run.py --scenario Water --drag-model linear --heuristic asymptote
"""
from dropsim.main import main

if __name__ == "__main__":
  raise SystemExit(main())
