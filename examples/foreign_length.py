from erasure.lab import HeterogeneousSequenceLab

lab = HeterogeneousSequenceLab()
lab.initialize()

# Index 3 holds the int; str.length does not apply to it.
print(lab.attempt_invalid_operation(3))
