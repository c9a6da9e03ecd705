#!/usr/bin/env python3
"""
Benchmark script for Data Compare tool.

Generates synthetic datasets, writes them out in every supported format,
and times a full comparison run for each one.

Usage:
    python benchmark.py
    python benchmark.py --rows 20000 --cols 20
    python benchmark.py --skip-excel  # Skip slow workbook round trip
"""

import argparse
import subprocess
import sys
import tempfile
import time
from pathlib import Path

import numpy as np
import pandas as pd


def generate_test_data(rows: int, cols: int, seed: int = 42) -> tuple[pd.DataFrame, pd.DataFrame]:
    """Generate two DataFrames with controlled differences."""
    np.random.seed(seed)

    data = {
        'id': [f'ID-{i:08d}' for i in range(rows)]
    }

    for i in range(cols):
        col_type = i % 3
        col_name = f'col_{i:03d}'

        if col_type == 0:  # String
            data[col_name] = [f'value_{np.random.randint(0, 1000)}' for _ in range(rows)]
        elif col_type == 1:  # Integer
            data[col_name] = np.random.randint(0, 10000, rows)
        else:  # Float
            data[col_name] = np.random.uniform(0, 1000, rows).round(4)

    df_a = pd.DataFrame(data)
    df_b = df_a.copy()

    # 1. Modify ~1% of rows in place
    mask = np.random.random(rows) < 0.01
    df_b.loc[mask, 'col_000'] = 'changed'

    # 2. Append a few rows to B, which show up as added
    new_rows = pd.DataFrame({
        'id': [f'ID-NEW-{i:04d}' for i in range(max(1, rows // 1000))],
        **{f'col_{i:03d}': ['new_value'] * max(1, rows // 1000) for i in range(cols)}
    })
    df_b = pd.concat([df_b, new_rows], ignore_index=True)

    return df_a, df_b


def save_test_files(df_a: pd.DataFrame, df_b: pd.DataFrame, tmpdir: Path,
                    fmt: str) -> tuple[Path, Path]:
    """Save DataFrames in the given format."""
    suffix = {'json': '.json', 'csv': '.csv', 'excel': '.xlsx', 'text': '.txt'}[fmt]
    path_a = tmpdir / f'test_a{suffix}'
    path_b = tmpdir / f'test_b{suffix}'

    for df, path in ((df_a, path_a), (df_b, path_b)):
        if fmt == 'json':
            df.to_json(path, orient='records')
        elif fmt == 'csv':
            df.to_csv(path, index=False)
        elif fmt == 'excel':
            df.to_excel(path, index=False)
        else:
            df.to_csv(path, index=False, header=False, sep=' ')

    return path_a, path_b


def run_benchmark(script: str, file_a: Path, file_b: Path, tmpdir: Path,
                  fmt: str) -> tuple[float, bool]:
    """Run the comparison script and measure time."""
    command = [
        sys.executable, script, str(file_a), str(file_b),
        '--output', str(tmpdir / f'report_{fmt}.md'),
        '--export-dir', str(tmpdir),
    ]
    if fmt == 'text':
        command += ['--left-format', 'text', '--right-format', 'text']

    start = time.perf_counter()

    try:
        result = subprocess.run(
            command,
            capture_output=True,
            text=True,
            timeout=3600  # 1 hour timeout
        )
        elapsed = time.perf_counter() - start
        success = result.returncode in [0, 1]  # 0=identical, 1=different

        if not success:
            print(f"  Error: {result.stderr[:200]}")

        return elapsed, success

    except subprocess.TimeoutExpired:
        return float('inf'), False


def format_time(seconds: float) -> str:
    """Format seconds to human readable."""
    if seconds == float('inf'):
        return 'TIMEOUT'
    elif seconds < 1:
        return f'{seconds*1000:.0f}ms'
    elif seconds < 60:
        return f'{seconds:.1f}s'
    else:
        return f'{seconds/60:.1f}min'


def main():
    parser = argparse.ArgumentParser(description='Benchmark Data Compare across input formats')
    parser.add_argument('--rows', type=int, default=10000, help='Number of rows (default: 10000)')
    parser.add_argument('--cols', type=int, default=20, help='Number of columns (default: 20)')
    parser.add_argument('--skip-excel', action='store_true', help='Skip Excel benchmark')
    args = parser.parse_args()

    script = Path(__file__).parent.parent / 'src' / 'data_compare.py'
    if not script.exists():
        print(f"Error: Script not found: {script}")
        sys.exit(1)

    formats = ['json', 'csv', 'text'] + ([] if args.skip_excel else ['excel'])

    print(f"{'='*60}")
    print(f"DATA COMPARE BENCHMARK")
    print(f"{'='*60}")
    print(f"Dataset: {args.rows:,} rows × {args.cols} columns")
    print()

    print("Generating test data...")
    start = time.perf_counter()
    df_a, df_b = generate_test_data(args.rows, args.cols)
    print(f"  Generated in {format_time(time.perf_counter() - start)}")
    print(f"  File A: {len(df_a):,} rows")
    print(f"  File B: {len(df_b):,} rows")
    print()

    with tempfile.TemporaryDirectory() as tmpdir:
        tmpdir = Path(tmpdir)
        results = {}

        for fmt in formats:
            path_a, path_b = save_test_files(df_a, df_b, tmpdir, fmt)
            print(f"{fmt.upper()}: Running ({path_a.stat().st_size / 1024 / 1024:.1f} MB per file)...")
            elapsed, success = run_benchmark(str(script), path_a, path_b, tmpdir, fmt)
            results[fmt] = (elapsed, success)
            print(f"  {'✓' if success else '✗'} Completed in {format_time(elapsed)}")

        print()
        print(f"{'='*60}")
        print("RESULTS")
        print(f"{'='*60}")
        print()
        print(f"{'Format':<20} {'Time':<15} {'Status':<10}")
        print(f"{'-'*20} {'-'*15} {'-'*10}")

        for fmt, (elapsed, success) in results.items():
            status = '✓ OK' if success else '✗ FAILED'
            print(f"{fmt:<20} {format_time(elapsed):<15} {status:<10}")

        print()


if __name__ == '__main__':
    main()
