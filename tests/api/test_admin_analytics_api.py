"""Admin Analytics & Dashboard — rollups over seeded orders."""

from datetime import timedelta

from sh_pizza.core.clock import utcnow


async def test_analytics_empty_store(client, admin_headers):
    res = await client.get("/api/admin/analytics", headers=admin_headers)
    assert res.status_code == 200
    body = res.json()
    assert body["totalOrders"] == 0
    assert body["averageOrderValue"] == 0
    assert len(body["revenueByMonth"]) == 6
    assert all(m["revenue"] == 0 for m in body["revenueByMonth"])
    assert body["topBranches"] == []


async def test_analytics_window_and_rollups(client, seed, customer, admin_headers):
    now = utcnow()
    north = await seed.branch("North")
    south = await seed.branch("South")
    await seed.order(customer.id, north.id, total="30.00", status="delivered")
    await seed.order(customer.id, north.id, total="10.00", status="pending")
    await seed.order(customer.id, south.id, total="15.00", status="delivered")
    await seed.order(
        customer.id, south.id, total="99.00",
        created_at=now - timedelta(days=45),
    )

    res = await client.get(
        "/api/admin/analytics", params={"days": 30}, headers=admin_headers,
    )
    body = res.json()
    assert body["totalOrders"] == 3
    assert body["totalRevenue"] == 55.0
    assert body["averageOrderValue"] == 18.33
    assert body["ordersByStatus"] == {"delivered": 2, "pending": 1}
    assert body["topBranches"][0] == {"name": "North", "orders": 2, "revenue": 40.0}
    assert len(body["recentOrders"]) == 4
    assert body["recentOrders"][0]["customerEmail"] == customer.email
    assert body["revenueByMonth"][-1]["revenue"] >= 55.0


async def test_analytics_requires_admin(client, customer_headers):
    res = await client.get("/api/admin/analytics", headers=customer_headers)
    assert res.status_code == 401


async def test_admin_dashboard_counts(client, seed, customer, admin_headers):
    now = utcnow()
    branch = await seed.branch()
    await seed.pizza(branch.id)
    await seed.order(customer.id, branch.id)
    await seed.offer("Live", now, now + timedelta(days=1))
    await seed.offer("Off", now, now + timedelta(days=1), is_active=False)

    res = await client.get("/api/admin/dashboard", headers=admin_headers)
    assert res.status_code == 200
    body = res.json()
    assert body["totalUsers"] == 2
    assert body["totalBranches"] == 1
    assert body["totalPizzas"] == 1
    assert body["totalOrders"] == 1
    assert body["activeOffers"] == 1
    assert len(body["recentOrders"]) == 1
