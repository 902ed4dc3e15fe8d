"""Personalised PageRank over a graph stored in compressed sparse rows."""

from collections.abc import Sequence


def page_rank(
    rowptr: Sequence[int],
    rowind: Sequence[int],
    rowval: Sequence[float],
    lamda: float,
    eps: float,
    max_niter: int,
    restart: Sequence[float],
) -> tuple[list[float], int]:
    """Compute (personalised) PageRank scores.

    Row ``i`` of the graph lists its out-links ``rowind[rowptr[i]:rowptr[i+1]]``
    with weights from ``rowval``. ``lamda`` is the probability of following a
    link rather than restarting, ``restart`` the restart distribution, which
    also serves as the starting scores. The score of vertices without
    out-links is redistributed by the restart distribution.

    Returns the scores and the iteration count: the number of the iteration
    at which the largest change fell below ``eps``, or ``max_niter + 1`` when
    it never did.
    """
    nrows = len(rowptr) - 1
    if nrows < 0:
        raise ValueError("rowptr must hold at least one entry")
    if len(restart) != nrows:
        raise ValueError(f"restart has {len(restart)} entries for {nrows} rows")
    if len(rowind) != len(rowval):
        raise ValueError("rowind and rowval must have equal length")

    rows = [range(rowptr[i], rowptr[i + 1]) for i in range(nrows)]

    rscale = []
    for span in rows:
        weight = sum((rowval[j] for j in span), 0.0)
        rscale.append(1.0 / weight if weight > 0 else weight)

    prnew = [float(value) for value in restart]
    iteration = 0
    while iteration < max_niter:
        prold = prnew
        prnew = [0.0] * nrows

        fromsinks = sum(score for score, s in zip(prold, rscale) if s == 0)

        for i, span in enumerate(rows):
            push = prold[i] * rscale[i]
            for j in span:
                prnew[rowind[j]] += push * rowval[j]

        prnew = [
            lamda * (fromsinks * r + pushed) + (1.0 - lamda) * r
            for pushed, r in zip(prnew, restart)
        ]

        error = max((abs(a - b) for a, b in zip(prnew, prold)), default=0.0)
        if error < eps:
            break
        iteration += 1

    return prnew, iteration + 1