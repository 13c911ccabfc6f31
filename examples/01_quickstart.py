from __future__ import annotations

from datetime import datetime, timedelta

from _infra import AuditFailure, Order, banner, run

from fluentfx import chain, chain_seq


def audit(order: Order) -> None:
    if order.total > 100:
        raise AuditFailure(f"order {order.id} needs review")


async def main() -> None:
    banner("01_quickstart: modify + for_each + pipeline_with")

    now = datetime.now()
    orders = [
        Order(1, 20.0, now - timedelta(days=3)),
        Order(2, 250.0, now - timedelta(hours=2)),
        Order(3, 12.5, now - timedelta(minutes=5)),
    ]

    summary = (
        chain_seq(orders)
        .newer_than_by(lambda o: o.created_at, timedelta(days=1))
        .modify(lambda o: o.tags.append("recent"))
        # audit failures are dropped silently here
        .for_each(audit, suppress=True)
        .pipeline_with(lambda o: o.id, lambda last_id: f"last recent order: {last_id}")
    )
    print(summary)

    amount = chain("12,50").map(lambda s: s.replace(",", ".")).map_or(float, default=0.0).value
    print(f"parsed amount: {amount}")


if __name__ == "__main__":
    run(main)
