from __future__ import annotations

import asyncio

from _infra import Failure, banner, run

from pledge import Future
from pledge import lift as L


def upload(chunks: list[bytes]) -> Future[int, Failure]:
    # Producer side: the executor drives the work and settles the future.
    def executor(resolve, reject, progress) -> None:
        loop = asyncio.get_running_loop()
        sent = 0

        def send(index: int) -> None:
            nonlocal sent
            if not chunks[index]:
                reject(Failure(f"chunk {index} is empty"))
                return
            sent += len(chunks[index])
            progress((index + 1) / len(chunks), f"chunk {index + 1}/{len(chunks)}")
            if index + 1 == len(chunks):
                resolve(sent)
            else:
                loop.call_later(0.01, send, index + 1)

        loop.call_soon(send, 0)

    return Future(executor)


async def main() -> None:
    banner("01_quickstart: executor + progress + callbacks + await")

    job = (
        upload([b"abc", b"defg", b"hi"])
        .on_progress(lambda percent, message: print(f"{percent:.0%} {message}"))
        .on_success(lambda size: print(f"uploaded {size} bytes"))
        .on_failure(lambda err: print(f"upload failed: {err}"))
        .on_settled(lambda: print("done"))
    )

    # Registering after settlement replays the outcome.
    print(await L.down.to_result(job))
    job.on_success(lambda size: print(f"replayed: {size}"))

    broken = upload([b"abc", b""])
    print(await broken)


if __name__ == "__main__":
    run(main)
