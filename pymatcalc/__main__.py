from pymatcalc.cli import run

run()
