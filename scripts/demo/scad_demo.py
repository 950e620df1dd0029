import numpy as np

import scad_penalty as scad


# Penalty curve across all three regions
beta = np.linspace(-8, 8, 400)
lam = 4
a = 2.5

penalty = scad.scad_penalty(beta, lam, a)
fig = scad.plot_scad(beta, penalty, lam, a, save_path="scripts/demo/scad_penalty.png")

pen = scad.SCADPenalty(lam=lam, a=a)
print(f"Breakpoints: lam={pen.breakpoints[0]:.2f}, a*lam={pen.breakpoints[1]:.2f}")
print(f"Flat-region penalty: {pen.max_penalty:.4f}")
print(f"Penalty at [2, 9, 11]: {pen([2, 9, 11])}")

profile = pen.profile(n_points=9)
print(profile.to_string(index=False))

# Normalization
data = [1, 5, 10]
print("Normalized Data:")
print(scad.safe_normalize(data))

# Range check
try:
    scad.check_range(lam, 0, 5, 'lam')
    print('lam is in range!')
except scad.OutOfRangeError as e:
    print(e)

scad.close_all_figures()
