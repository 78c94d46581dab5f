#!/usr/bin/env python3
"""Replay captured status payloads through a device session.

Each payload is fed to :meth:`VacuumDevice.update_status` exactly as if the
robot had answered ``get_status`` with it, against an in-memory state tree.
The resulting tree (and, optionally, every write) is printed afterwards, so
a capture from a real robot can be checked without any hardware.

Usage
-----
::

    python scripts/replay_status.py captures/s7.json
    python scripts/replay_status.py --model roborock.vacuum.a101 captures/a101.json --json

The input file holds either one status object or a list of them.

Options::

    --model MODEL            Robot model used to pick the value-mapping profile
    --duid DUID              Device id used in state ids (default: replay)
    --static-feature NAME    Capability known up front (repeatable)
    --journal                Also print every write in order
    --json                   Output as machine-readable JSON
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any

from pyrobovac import DeviceModelConfig, VacuumDevice
from pyrobovac.exceptions import RobovacError
from pyrobovac.services import DeviceDependencies
from pyrobovac.state import InMemoryStateStore

_logger = logging.getLogger("replay_status")


class _ReplayTransport:
    def __init__(self) -> None:
        self.status: Any = {}

    async def get_status(self) -> Any:
        return self.status

    async def get_firmware_features(self) -> list[int]:
        return []

    async def get_network_info(self) -> dict[str, Any]:
        return {}

    async def get_timers(self) -> list[Any]:
        return []


class _NullMaps:
    current_index = 0

    async def update_multi_maps_list(self) -> None:
        return None

    async def update_map(self) -> None:
        return None

    def update_current_map_index(self, map_status: int) -> bool:
        index = map_status >> 2
        changed = index != self.current_index
        self.current_index = index
        return changed

    async def update_room_mapping(self) -> None:
        return None

    async def get_cleaning_record_map(self, start_time: int) -> None:
        return None


class _NullConsumables:
    async def update_consumables(self) -> None:
        return None

    async def update_consumables_percent(self) -> None:
        return None


def _load_payloads(path: Path) -> list[Any]:
    data = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(data, list):
        return data
    return [data]


def _section(title: str) -> str:
    line = "=" * 60
    return f"\n{line}\n  {title}\n{line}"


async def replay(args: argparse.Namespace) -> dict[str, Any]:
    store = InMemoryStateStore()
    transport = _ReplayTransport()
    deps = DeviceDependencies(
        store=store,
        transport=transport,
        maps=_NullMaps(),
        consumables=_NullConsumables(),
    )
    config = DeviceModelConfig(static_features=args.static_feature or ())
    device = VacuumDevice(deps, args.duid, args.model, config=config)
    await device.setup_protocol_features()

    payloads = _load_payloads(Path(args.input))
    for index, payload in enumerate(payloads):
        transport.status = payload
        _logger.debug("Replaying payload %d/%d", index + 1, len(payloads))
        await device.update_status()

    result: dict[str, Any] = {
        "model": args.model,
        "profile": device.profile.name or "default",
        "payloads": len(payloads),
        "capabilities": sorted(feature.value for feature in device.features.enabled),
        "states": store.snapshot(),
    }
    if args.journal:
        result["journal"] = [write.model_dump(mode="json") for write in store.journal]
    return result


def _print_text(result: dict[str, Any]) -> None:
    out: list[str] = [_section("pyrobovac replay_status")]
    out.append(f"  model        : {result['model']} (profile {result['profile']})")
    out.append(f"  payloads     : {result['payloads']}")
    out.append(f"  capabilities : {', '.join(result['capabilities']) or '-'}")

    out.append(_section("STATES"))
    for state_id, value in result["states"].items():
        out.append(f"  {state_id} = {value!r}")

    if "journal" in result:
        out.append(_section("JOURNAL"))
        for write in result["journal"]:
            out.append(f"  {write['state_id']} <- {write['value']!r} (ack={write['ack']})")
    print("\n".join(out))


def main() -> None:
    parser = argparse.ArgumentParser(description="Replay captured status payloads into an in-memory state tree.")
    parser.add_argument("input", help="JSON file with one status object or a list of them")
    parser.add_argument("--model", default="", help="Robot model, e.g. roborock.vacuum.s7")
    parser.add_argument("--duid", default="replay", help="Device id used in state ids")
    parser.add_argument(
        "--static-feature",
        action="append",
        metavar="NAME",
        help="Capability known up front, e.g. docking_station_status (repeatable)",
    )
    parser.add_argument("--journal", action="store_true", help="Also print every write in order")
    parser.add_argument("--json", action="store_true", dest="json_mode", help="Output machine-readable JSON")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    else:
        logging.basicConfig(level=logging.WARNING)

    try:
        result = asyncio.run(replay(args))
    except (OSError, json.JSONDecodeError, RobovacError) as exc:
        print(f"replay failed: {exc}", file=sys.stderr)
        sys.exit(1)

    if args.json_mode:
        print(json.dumps(result, indent=2, ensure_ascii=False, default=str))
    else:
        _print_text(result)


if __name__ == "__main__":
    main()
