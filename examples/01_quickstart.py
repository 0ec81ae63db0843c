from __future__ import annotations

from _infra import FakeBackend, banner, run

from eventual import RetryPolicy, concurrent, lift as L, recover, retry, transform
from kungfu import Error, Ok


async def main() -> None:
    banner("01_quickstart: call + retry + concurrent + recover")

    api = FakeBackend(name="api", delay_seconds=0.01, failures_before_ok=2)

    user = retry(L.call(api.fetch_user, 42), policy=RetryPolicy.fixed(3, delay_seconds=0.01))
    both = concurrent(lambda: user, L.call(api.fetch_orders, 42))
    summary = transform(both, lambda pair: f"{pair[0].name} has {len(pair[1])} orders")

    match await recover(summary, default="nobody home"):
        case Ok(message):
            print(message)
        case Error(err):
            print(f"error: {err!r}")


if __name__ == "__main__":
    run(main)
