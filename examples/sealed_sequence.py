from erasure.lab import HeterogeneousSequenceLab, LabConfig

# Without the unsafe handle the lab cannot be set up at all.
lab = HeterogeneousSequenceLab(LabConfig(allow_unsafe=False))
lab.initialize()
