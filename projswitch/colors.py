"""ANSI 16-colour escape sequences; the terminal theme decides the actual colours."""

GRN = "\x1b[32m"  # colour 2
BLU = "\x1b[34m"  # colour 4
SKY = "\x1b[36m"  # colour 6
MVE = "\x1b[35m"  # colour 5
YEL = "\x1b[33m"  # colour 3
PCH = "\x1b[93m"  # colour 11, the nearest to peach in 16 colours
DIM = "\x1b[2m"
SUB = "\x1b[37m"  # colour 7
RST = "\x1b[0m"
BLD = "\x1b[1m"