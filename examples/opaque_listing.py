from erasure.lab import HeterogeneousSequenceLab

# Treating every element as an opaque value never notices the int.
lab = HeterogeneousSequenceLab()
lab.initialize()
print(lab.format_opaque())
