import os
import sys

THIS_DIR = os.path.dirname(os.path.abspath(__file__))
SRC = os.path.abspath(os.path.join(THIS_DIR, "..", "src"))
if SRC not in sys.path:
    sys.path.insert(0, SRC)

from beam_calc.domain.beam import BeamConfig
from beam_calc.domain.loads import LoadConfig
from beam_calc.engine.diagrams import build_V_M

beam = BeamConfig(beam_type="simple", length_mm=6000, left_support_mm=500, right_support_mm=5500)
load = LoadConfig(load_type="uniform", magnitude_N=12000, start_mm=1500, end_mm=4000)

diag = build_V_M(beam, load)
R_A, R_B = diag.reactions()

x, V, M = diag.sample()
print("R_A =", R_A, " R_B =", R_B)
print("V(0) =", diag.eval_V(0))
print("M(0) =", diag.eval_M(0))
print("V(L) =", diag.eval_V(diag.x_end))
print("M(L) =", diag.eval_M(diag.x_end))
print("M(2.0) =", diag.eval_M(2.0))
