"""LatestOnlyScheduler: a quick second request supersedes the first."""

import random
import threading

from asi import LatestOnlyScheduler, SuitabilityResult, evaluate, generate_series, get_profile


def main() -> None:
    done = threading.Event()
    scheduler = LatestOnlyScheduler(delay=0.5)
    profile = get_profile("beach")

    def show(label: str):
        def apply(result: SuitabilityResult) -> None:
            print(f"  {label}: ASI {result.score} ({result.level.value})")
            done.set()
        return apply

    def compute_for(lat: float, lng: float):
        return lambda: evaluate(generate_series(lat, lng, rng=random.Random(7)), profile)

    print("=== Submitting London, then Tokyo right after ===")
    first = scheduler.submit(compute_for(51.5074, -0.1278), show("London"))
    second = scheduler.submit(compute_for(35.6762, 139.6503), show("Tokyo"))
    print(f"  tickets {first} and {second}; only {scheduler.latest_ticket} is applied")

    done.wait(timeout=5)
    print(f"  pending after apply: {scheduler.pending}")


if __name__ == "__main__":
    main()
