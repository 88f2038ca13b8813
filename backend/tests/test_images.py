def test_upload_and_fetch_round_trip(client, upload_image):
    payload = b"\xff\xd8\xff\xe0fake-jpeg-bytes"
    image_id = upload_image("leaf.png", payload, "image/png")

    resp = client.get(f"/api/images/{image_id}")

    assert resp.status_code == 200
    assert resp.content == payload
    assert resp.headers["content-type"] == "image/png"


def test_upload_returns_image_id(client):
    resp = client.post("/api/admin/images", files={"file": ("a.jpg", b"abc", "image/jpeg")})

    assert resp.status_code == 201, resp.text
    assert set(resp.json()) == {"imageId"}


def test_upload_empty_file_is_rejected(client):
    resp = client.post("/api/admin/images", files={"file": ("empty.jpg", b"", "image/jpeg")})

    assert resp.status_code == 400
    body = resp.json()
    assert body["message"] == "Image file cannot be empty"
    assert body["status"] == 400
    assert body["path"] == "/api/admin/images"
    assert client.get("/api/admin/images").json() == []


def test_upload_non_image_is_rejected(client):
    resp = client.post("/api/admin/images", files={"file": ("notes.txt", b"hello", "text/plain")})

    assert resp.status_code == 400
    assert "image/*" in resp.json()["message"]
    assert client.get("/api/admin/images").json() == []


def test_list_images_returns_metadata_only(client, upload_image):
    image_id = upload_image("fern.jpg")

    resp = client.get("/api/admin/images")

    assert resp.status_code == 200
    [entry] = resp.json()
    assert entry["id"] == image_id
    assert entry["filename"] == "fern.jpg"
    assert entry["contentType"] == "image/jpeg"
    assert entry["createdDate"]
    assert "bytes" not in entry


def test_get_unknown_image_returns_404(client):
    resp = client.get("/api/images/does-not-exist")

    assert resp.status_code == 404
    body = resp.json()
    assert body["error"] == "Not Found"
    assert "does-not-exist" in body["message"]
    assert "validationErrors" not in body


def test_delete_image(client, upload_image):
    image_id = upload_image()

    assert client.delete(f"/api/admin/images/{image_id}").status_code == 204
    assert client.get(f"/api/images/{image_id}").status_code == 404
    assert client.delete(f"/api/admin/images/{image_id}").status_code == 404


def test_delete_image_leaves_group_reference_dangling(client, upload_image):
    image_id = upload_image()
    client.post("/api/admin/plant-groups", json={"id": "ferns", "name": "Ferns", "imageId": image_id})

    assert client.delete(f"/api/admin/images/{image_id}").status_code == 204

    group = client.get("/api/admin/plant-groups/ferns").json()
    assert group["imageId"] == image_id
