import uuid
import pytest


async def _create(client, email, password="pw", **fields):
	resp = await client.post('/api/v1/users/', json={"email": email, "password": password, **fields})
	assert resp.status_code == 201, resp.text
	return resp.json()


@pytest.mark.asyncio
@pytest.mark.integration
async def test_create_user(client):
	body = await _create(client, "alice@example.com", first_name="Alice", last_name="Liddell", role="ADMIN")
	assert body['email'] == "alice@example.com"
	assert body['name'] == "Alice Liddell"
	assert body['role'] == "ADMIN"
	assert body['updated'] is None
	assert 'password' not in body


@pytest.mark.asyncio
@pytest.mark.integration
async def test_create_requires_password(client):
	resp = await client.post('/api/v1/users/', json={"email": "nopw@example.com", "password": ""})
	assert resp.status_code == 422


@pytest.mark.asyncio
@pytest.mark.integration
async def test_duplicate_email(client):
	await _create(client, "bob@example.com")
	resp = await client.post('/api/v1/users/', json={"email": "bob@example.com", "password": "pw"})
	assert resp.status_code == 409


@pytest.mark.asyncio
@pytest.mark.integration
async def test_get_user(client):
	created = await _create(client, "get@example.com", phone_number="555-0100")
	resp = await client.get(f"/api/v1/users/{created['id']}")
	assert resp.status_code == 200
	assert resp.json() == created

	missing = str(uuid.uuid4())
	resp = await client.get(f"/api/v1/users/{missing}")
	assert resp.status_code == 404
	assert missing in resp.json()['detail']


@pytest.mark.asyncio
@pytest.mark.integration
async def test_list_users_empty(client):
	resp = await client.get('/api/v1/users/')
	assert resp.status_code == 200
	assert resp.json() == []
	assert resp.headers['x-total-count'] == "0"
	assert resp.headers['x-total-pages'] == "0"


@pytest.mark.asyncio
@pytest.mark.integration
async def test_list_users_filtered_and_paged(client):
	emails = ["a@example.com", "b@example.com", "c@example.com"]
	for e, last in zip(emails, ["Lee", "Lee", "Moss"]):
		await _create(client, e, last_name=last)

	resp = await client.get('/api/v1/users/', params={"size": 2, "sort": "email,desc"})
	assert resp.status_code == 200
	assert [u['email'] for u in resp.json()] == ["c@example.com", "b@example.com"]
	assert resp.headers['x-total-count'] == "3"
	assert resp.headers['x-total-pages'] == "2"

	resp = await client.get('/api/v1/users/', params=[("last_names", "Lee"), ("emails", "b@example.com"), ("emails", "c@example.com")])
	assert [u['email'] for u in resp.json()] == ["b@example.com"]
	assert resp.headers['x-total-count'] == "1"


@pytest.mark.asyncio
@pytest.mark.integration
async def test_list_users_bad_sort(client):
	resp = await client.get('/api/v1/users/', params={"sort": "password"})
	assert resp.status_code == 400


@pytest.mark.asyncio
@pytest.mark.integration
async def test_list_users_by_updated_range(client):
	stale = await _create(client, "stale@example.com")
	fresh = await _create(client, "fresh@example.com")
	patched = await client.patch(f"/api/v1/users/{fresh['id']}", json={"first_name": "Fresh"})
	stamp = patched.json()['updated']

	resp = await client.get('/api/v1/users/', params={"updated_after": stamp})
	assert [u['email'] for u in resp.json()] == ["fresh@example.com"]
	resp = await client.get('/api/v1/users/', params={"updated_after": stamp, "after_inclusive": "false"})
	assert resp.json() == []
	assert stale['id'] not in {u['id'] for u in resp.json()}


@pytest.mark.asyncio
@pytest.mark.integration
async def test_search_by_name(client):
	await _create(client, "1@example.com", first_name="Ann")
	await _create(client, "2@example.com", last_name="Mann")
	await _create(client, "3@example.com", first_name="Zed")
	resp = await client.get('/api/v1/users/name/ANN', params={"sort": "email"})
	assert resp.status_code == 200
	assert [u['email'] for u in resp.json()] == ["1@example.com", "2@example.com"]
	assert resp.headers['x-total-count'] == "2"


@pytest.mark.asyncio
@pytest.mark.integration
async def test_update_user(client):
	created = await _create(client, "upd@example.com", first_name="Old", last_name="Keep")
	resp = await client.patch(f"/api/v1/users/{created['id']}", json={"first_name": "New", "last_name": " "})
	assert resp.status_code == 200
	body = resp.json()
	assert body['first_name'] == "New"
	assert body['last_name'] == "Keep"
	assert body['updated'] is not None

	resp = await client.get(f"/api/v1/users/{created['id']}")
	assert resp.json()['first_name'] == "New"

	missing = await client.patch(f"/api/v1/users/{uuid.uuid4()}", json={"first_name": "X"})
	assert missing.status_code == 404


@pytest.mark.asyncio
@pytest.mark.integration
async def test_delete_user(client):
	created = await _create(client, "del@example.com")
	d = await client.delete(f"/api/v1/users/{created['id']}")
	assert d.status_code == 200
	assert d.json() is True
	# verify gone
	again = await client.delete(f"/api/v1/users/{created['id']}")
	assert again.status_code == 404
	assert (await client.get(f"/api/v1/users/{created['id']}")).status_code == 404
