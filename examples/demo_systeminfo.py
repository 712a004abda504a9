#!/usr/bin/env python3
"""
Demo script for the system_info() function
"""

from systeminfo_lite import system_info


def main():
    print("Getting system information...")

    info = system_info()

    print(f"\n=== System Information ===")
    print(f"OS: {info.os.name} ({info.os.architecture})")
    print(f"  Version: {info.os.version.strip()}")
    print(f"CPU: {info.cpu.manufacturer} {info.cpu.model}")
    print(f"  Cores: {info.cpu.cores} logical")
    print(f"RAM: {info.ram.total} GB")

    if info.gpu:
        for gpu in info.gpu:
            line = f"GPU: {gpu.manufacturer} {gpu.model}"
            if gpu.memory is not None:
                line += f" ({gpu.memory} GB)"
            if gpu.cores is not None:
                line += f" [{gpu.cores} cores]"
            print(line)
    else:
        print("GPU: None detected")

    # JSON serialization (absent fields are omitted)
    print(f"\n=== JSON Output ===")
    print(info.to_json(indent=2))


if __name__ == "__main__":
    main()
