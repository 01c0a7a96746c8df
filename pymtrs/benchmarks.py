"""
Micro-benchmarks for the core matrix operations.

Times transpose, the four scalar operations and the determinant on the
4x4 integer matrix 1..16.

Usage:
    python -m pymtrs.benchmarks
"""

from pymtrs.core.compute.timing import Timer
from pymtrs.linalg import Matrix


def _bench_matrix() -> Matrix:
    return Matrix.from_vec((4, 4), list(range(1, 17)), dtype=int)


def _scalar_ops(matrix: Matrix) -> None:
    matrix.scalar_add(13)
    matrix.scalar_sub(3)
    matrix.scalar_div(2)
    matrix.scalar_mul(5)


def run(repeat: int = 1000) -> Timer:
    """
    Run every benchmark ``repeat`` times.

    Returns:
        Timer holding 'transpose', 'scalar_ops' and 'determinant'
    """
    timer = Timer(repeat)
    matrix = _bench_matrix()

    timer.measure('transpose', Matrix.transpose, setup=_bench_matrix)
    timer.measure('scalar_ops', lambda: _scalar_ops(matrix))
    timer.measure('determinant', matrix.determinant)
    return timer


def main() -> None:
    print("pymtrs benchmarks")
    print("=" * 40)
    print(run().report())


if __name__ == "__main__":
    main()
