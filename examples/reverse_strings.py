from erasure.lab import HeterogeneousSequenceLab

lab = HeterogeneousSequenceLab()
lab.initialize()

# Casting each element to str breaks on the fourth one.
print(lab.format_assuming_declared())
