"""Report memory, disks, processes and users of this machine."""

from __future__ import annotations

import argparse
import os

import psutil


def memory_lines() -> list[str]:
    memory = psutil.virtual_memory()
    swap = psutil.swap_memory()
    return [
        f"System memory:\t {memory.total // 1024} KB",
        f"Used memory:\t {memory.used // 1024} KB",
        f"Total swap:\t {swap.total // 1024} KB",
        f"Used swap:\t {swap.used // 1024} KB",
    ]


def disk_lines() -> list[str]:
    return [
        f"Disk {{ device: {p.device!r}, mount_point: {p.mountpoint!r}, file_system: {p.fstype!r} }}"
        for p in psutil.disk_partitions()
    ]


def process_lines() -> list[str]:
    lines = []
    for proc in psutil.process_iter(["pid", "name", "status"]):
        info = proc.info
        lines.append(f"{info['pid']}:{info['name']}, status: {info['status']}")
    return lines


def user_lines() -> list[str]:
    """List each account with the number of groups it belongs to."""
    import pwd

    return [
        f"{entry.pw_name} is in {len(os.getgrouplist(entry.pw_name, entry.pw_gid))} groups"
        for entry in pwd.getpwall()
    ]


_REPORTS = {"disks": disk_lines, "memory": memory_lines, "process": process_lines, "users": user_lines}


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="sysdetails", description="Show system details.")
    parser.add_argument("report")
    args = parser.parse_args(argv)

    print(f"This system has been up {int(psutil.boot_time())} seconds")
    print(f"The current process id is {os.getpid()}")
    report = _REPORTS.get(args.report)
    if report is None:
        print("You haven't provided an acceptable parameter")
    else:
        for line in report():
            print(line)
    return 0