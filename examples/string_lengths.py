from erasure.lab import HeterogeneousSequenceLab

lab = HeterogeneousSequenceLab()
lab.initialize()

for i in (0, 1, 2, 4, 5):
    print(lab.attempt_invalid_operation(i))
