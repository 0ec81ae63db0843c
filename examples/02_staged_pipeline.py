from __future__ import annotations

import hashlib
from concurrent.futures import ThreadPoolExecutor

from _infra import FakeBackend, User, banner, run

from eventual import Outcome, lift as L, pipeline, sequential, stage
from kungfu import Error, Ok


def fingerprint(user: User, salt: str) -> str:
    # CPU-bound, runs on the pool
    return hashlib.sha256(f"{salt}:{user.id}:{user.name}".encode()).hexdigest()[:12]


async def main() -> None:
    banner("02_staged_pipeline: fetch -> fingerprint on a pool -> label")

    api = FakeBackend(name="api", delay_seconds=0.01)

    with ThreadPoolExecutor(max_workers=2) as pool:

        def hash_stage(user: User, salt: str) -> Outcome[str, Exception]:
            return L.blocking(fingerprint, user, salt, executor=pool)()

        labelled = pipeline(
            L.call(api.fetch_user, 7),
            stage(hash_stage, "pepper"),
            lambda digest: L.fulfilled(f"user-{digest}"),
        )
        result = await labelled

    match result:
        case Ok(label):
            print(label)
        case Error(err):
            print(f"error: {err!r}")

    # Strictly ordered pair: orders load only once the user exists
    match await sequential(L.call(api.fetch_user, 8), L.call(api.fetch_orders, 8)):
        case Ok((user, orders)):
            print(f"{user.name}: {orders}")
        case Error(err):
            print(f"error: {err!r}")


if __name__ == "__main__":
    run(main)
