# CODATA 2018 Bohr radius: 0.529177210903 Angstrom.
ANGSTROM_TO_BOHR = 1.8897261254578281
