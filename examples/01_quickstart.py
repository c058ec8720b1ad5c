from __future__ import annotations

import json

from outcomes import Failure, StringResult, Success, lift as L


def parse_config(raw: str) -> StringResult[dict]:
    # Locality: exception-based parsing lifted at the call site.
    return L.catching(lambda: json.loads(raw))


def main() -> None:
    print("01_quickstart: lift + safe_map + flat_map + projection")

    result = (
        parse_config('{"port": "8080"}')
        .safe_map(lambda config: config["port"])
        .safe_map(int)
        .flat_map(lambda port: Success(port) if port > 1024 else Failure.with_message("privileged port"))
    )
    match result:
        case Success(port):
            print(f"listening on {port}")
        case Failure(detail):
            print(f"error: {detail!r}")

    match parse_config("{port}"):
        case Failure() as broken:
            for category, message in broken.add("info", "while reading settings.json").error:
                print(f"{category}: {message}")
        case Success(config):
            print(f"unexpected: {config!r}")


if __name__ == "__main__":
    main()
