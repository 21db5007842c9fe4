"""Admin Branches — store location CRUD.

Tests:
    - Create defaults: active, empty delivery zones
    - Duplicate names rejected on create and rename
    - Branches still referenced by users, pizzas or orders cannot be deleted
    - A name taken between the duplicate check and the commit is still a 400
"""

from uuid import uuid4

from sh_pizza.services import branches as branches_service


async def test_create_branch(client, admin_headers):
    res = await client.post(
        "/api/admin/branches",
        json={"name": "Harbour", "address": "2 Quay Rd", "phone": "555-0101"},
        headers=admin_headers,
    )
    assert res.status_code == 201
    body = res.json()
    assert body["message"] == "Branch created successfully"
    assert body["branch"]["isActive"] is True
    assert body["branch"]["deliveryZones"] == []


async def test_create_branch_cleans_delivery_zones(client, admin_headers):
    res = await client.post(
        "/api/admin/branches",
        json={
            "name": "Harbour", "address": "2 Quay Rd", "phone": "555-0101",
            "deliveryZones": [" North ", "", "South"],
        },
        headers=admin_headers,
    )
    assert res.json()["branch"]["deliveryZones"] == ["North", "South"]


async def test_create_branch_missing_fields(client, admin_headers):
    res = await client.post(
        "/api/admin/branches", json={"name": "Harbour", "address": " "},
        headers=admin_headers,
    )
    assert res.status_code == 400
    assert res.json()["error"]["message"] == "Name, address, and phone are required"


async def test_create_branch_duplicate_name(client, seed, admin_headers):
    await seed.branch("Harbour")
    res = await client.post(
        "/api/admin/branches",
        json={"name": "Harbour", "address": "elsewhere", "phone": "555-0199"},
        headers=admin_headers,
    )
    assert res.status_code == 400
    assert res.json()["error"]["message"] == "Branch with this name already exists"


async def test_list_branches_exact_search(client, seed, admin_headers):
    await seed.branch("Harbour")
    await seed.branch("Hill")
    res = await client.get(
        "/api/admin/branches", params={"search": "Hill"}, headers=admin_headers,
    )
    body = res.json()
    assert [b["name"] for b in body["branches"]] == ["Hill"]
    assert body["pagination"]["total"] == 1


async def test_update_branch(client, seed, admin_headers):
    branch = await seed.branch("Harbour")
    res = await client.put(
        "/api/admin/branches",
        json={"id": str(branch.id), "isActive": False, "phone": "555-0000"},
        headers=admin_headers,
    )
    assert res.status_code == 200
    body = res.json()["branch"]
    assert body["isActive"] is False
    assert body["phone"] == "555-0000"
    assert body["name"] == "Harbour"


async def test_rename_onto_existing_branch(client, seed, admin_headers):
    await seed.branch("Harbour")
    hill = await seed.branch("Hill")
    res = await client.put(
        "/api/admin/branches", json={"id": str(hill.id), "name": "Harbour"},
        headers=admin_headers,
    )
    assert res.status_code == 400


async def test_update_branch_requires_id(client, admin_headers):
    res = await client.put(
        "/api/admin/branches", json={"name": "X"}, headers=admin_headers,
    )
    assert res.status_code == 400
    assert res.json()["error"]["message"] == "Branch ID is required"


async def test_update_unknown_branch(client, admin_headers):
    res = await client.put(
        "/api/admin/branches", json={"id": str(uuid4()), "name": "X"},
        headers=admin_headers,
    )
    assert res.status_code == 404


async def test_delete_branch(client, seed, admin_headers):
    branch = await seed.branch("Harbour")
    res = await client.delete(
        "/api/admin/branches", params={"id": str(branch.id)}, headers=admin_headers,
    )
    assert res.status_code == 200
    listing = await client.get("/api/admin/branches", headers=admin_headers)
    assert listing.json()["branches"] == []


async def test_delete_branch_with_pizzas_is_refused(client, seed, admin_headers):
    branch = await seed.branch("Harbour")
    await seed.pizza(branch.id)
    res = await client.delete(
        "/api/admin/branches", params={"id": str(branch.id)}, headers=admin_headers,
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "BRANCH_IN_USE"


async def test_delete_branch_with_staff_is_refused(client, seed, admin_headers):
    branch = await seed.branch("Harbour")
    await seed.user("staff@shpizza.test", role="STAFF", branch_id=branch.id)
    res = await client.delete(
        "/api/admin/branches", params={"id": str(branch.id)}, headers=admin_headers,
    )
    assert res.status_code == 400


async def test_delete_unknown_branch(client, admin_headers):
    res = await client.delete(
        "/api/admin/branches", params={"id": str(uuid4())}, headers=admin_headers,
    )
    assert res.status_code == 404


async def test_delete_branch_with_orders_is_refused(client, seed, customer, admin_headers):
    branch = await seed.branch("Harbour")
    await seed.order(customer.id, branch.id)
    res = await client.delete(
        "/api/admin/branches", params={"id": str(branch.id)}, headers=admin_headers,
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "BRANCH_IN_USE"
    listing = await client.get("/api/admin/branches", headers=admin_headers)
    assert [b["name"] for b in listing.json()["branches"]] == ["Harbour"]


async def test_create_branch_losing_name_race_is_400(
    client, seed, admin_headers, monkeypatch,
):
    # another writer inserts the same name between the check and the commit
    async def name_free(*args):
        return False

    monkeypatch.setattr(branches_service, "exists", name_free)
    await seed.branch("Harbour")
    res = await client.post(
        "/api/admin/branches",
        json={"name": "Harbour", "address": "elsewhere", "phone": "555-0199"},
        headers=admin_headers,
    )
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "DUPLICATE_RESOURCE"
    assert error["message"] == "Branch with this name already exists"
