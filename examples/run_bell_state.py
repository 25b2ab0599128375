"""Example: Bell state on tiny-qed."""
import tiny_qed as qed

print("=" * 50)
print("tiny-qed: Bell State Example")
print("=" * 50)

circuit = qed.new_register(2, 2)
circuit = qed.h(circuit, 0)
circuit = qed.cx(circuit, 0, 1)
circuit = qed.measure(circuit, 0, 0)
circuit = qed.measure(circuit, 1, 1)

print()
print(qed.draw(circuit))

counts = qed.run(circuit, 1000)

print("\nMeasurement Results:")
for state, count in sorted(counts.items()):
    print(f"  |{state}⟩: {count:4d} ({100*count/1000:5.1f}%)")

print("\nExpected: ~50% |00⟩ and ~50% |11⟩ (entangled!)")
