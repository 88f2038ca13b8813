from app.models import Issue, Plant, PlantImage


def test_create_plant_returns_full_detail(client, catalog, make_plant_payload):
    payload = make_plant_payload()

    resp = client.post("/api/admin/plants", json=payload)

    assert resp.status_code == 201, resp.text
    body = resp.json()
    assert body == {key: payload[key] for key in body}
    assert body["imageIds"] == [catalog["image1"], catalog["image2"]]
    assert len(body["commonIssues"]) == 2
    assert client.get("/api/plants/new-plant").json() == body


def test_create_duplicate_plant_returns_409(client, make_plant_payload):
    client.post("/api/admin/plants", json=make_plant_payload())

    resp = client.post("/api/admin/plants", json=make_plant_payload(name="Another"))

    assert resp.status_code == 409
    assert client.get("/api/plants/new-plant").json()["name"] == "Test Plant"


def test_create_plant_with_unknown_group_returns_400(client, make_plant_payload):
    resp = client.post("/api/admin/plants", json=make_plant_payload(groupId="missing"))

    assert resp.status_code == 400
    assert resp.json()["message"] == "Plant group not found: missing"
    assert client.get("/api/admin/plants").json() == []


def test_create_plant_with_unknown_thumbnail_returns_400(client, make_plant_payload):
    resp = client.post("/api/admin/plants", json=make_plant_payload(thumbnailId="missing"))

    assert resp.status_code == 400
    assert "Thumbnail image not found" in resp.json()["message"]
    assert client.get("/api/plants/new-plant").status_code == 404


def test_create_plant_with_unknown_gallery_image_writes_nothing(client, catalog, make_plant_payload):
    resp = client.post(
        "/api/admin/plants",
        json=make_plant_payload(imageIds=[catalog["image1"], "missing-image"]),
    )

    assert resp.status_code == 400
    assert resp.json()["message"] == "Image not found: missing-image"
    assert client.get("/api/plants/new-plant").status_code == 404
    assert client.get("/api/plant-groups/test-group/plants").json() == []


def test_create_plant_validation_errors(client, make_plant_payload):
    payload = make_plant_payload(
        name="",
        imageIds=[],
        benefits=["only one"],
        commonIssues=[{"issue": "Lonely", "solution": "Add another"}],
    )
    payload["care"]["watering"] = " "

    resp = client.post("/api/admin/plants", json=payload)

    assert resp.status_code == 400
    body = resp.json()
    assert body["error"] == "Bad Request"
    fields = {error["field"]: error["message"] for error in body["validationErrors"]}
    assert fields["name"] == "Plant name is required"
    assert fields["imageIds"] == "Must have between 1 and 3 images"
    assert fields["benefits"] == "Must have between 4 and 5 benefits"
    assert fields["commonIssues"] == "Must have between 2 and 4 common issues"
    assert fields["care.watering"] == "Watering information is required"


def test_create_plant_missing_care_is_rejected(client, make_plant_payload):
    payload = make_plant_payload()
    del payload["care"]

    resp = client.post("/api/admin/plants", json=payload)

    assert resp.status_code == 400
    assert any(e["field"] == "care" for e in resp.json()["validationErrors"])


def test_update_plant_replaces_images_and_issues(client, catalog, make_plant_payload):
    client.post("/api/admin/plants", json=make_plant_payload())
    update = make_plant_payload(
        name="Renamed Plant",
        imageIds=[catalog["image2"], catalog["thumbnail"], catalog["image1"]],
        commonIssues=[
            {"issue": "Root rot", "solution": "Repot in dry soil"},
            {"issue": "Aphids", "solution": "Spray with soapy water"},
            {"issue": "Leaf drop", "solution": "Avoid cold drafts"},
        ],
    )
    del update["id"]

    resp = client.put("/api/admin/plants/new-plant", json=update)

    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert body["name"] == "Renamed Plant"
    assert body["imageIds"] == [catalog["image2"], catalog["thumbnail"], catalog["image1"]]
    assert [i["issue"] for i in body["commonIssues"]] == ["Root rot", "Aphids", "Leaf drop"]
    assert client.get("/api/plants/new-plant").json() == body


def test_update_unknown_plant_returns_404(client, make_plant_payload):
    update = make_plant_payload()
    del update["id"]

    resp = client.put("/api/admin/plants/ghost", json=update)

    assert resp.status_code == 404
    assert client.get("/api/admin/plants").json() == []


def test_update_plant_with_unknown_image_leaves_plant_unchanged(client, catalog, make_plant_payload):
    created = client.post("/api/admin/plants", json=make_plant_payload()).json()
    update = make_plant_payload(name="Changed", imageIds=["missing"])
    del update["id"]

    resp = client.put("/api/admin/plants/new-plant", json=update)

    assert resp.status_code == 400
    assert client.get("/api/plants/new-plant").json() == created


def test_delete_plant_removes_it_from_group_listing(client, make_plant_payload):
    client.post("/api/admin/plants", json=make_plant_payload())
    client.post("/api/admin/plants", json=make_plant_payload("second-plant"))

    assert client.delete("/api/admin/plants/new-plant").status_code == 204

    assert client.get("/api/plants/new-plant").status_code == 404
    listed = client.get("/api/plant-groups/test-group/plants").json()
    assert [p["id"] for p in listed] == ["second-plant"]


def test_delete_plant_keeps_images(client, catalog, make_plant_payload):
    client.post("/api/admin/plants", json=make_plant_payload())

    client.delete("/api/admin/plants/new-plant")

    assert client.get(f"/api/images/{catalog['image1']}").status_code == 200


def test_delete_unknown_plant_returns_404(client):
    assert client.delete("/api/admin/plants/ghost").status_code == 404


def test_list_by_group_summary_view(client, catalog, make_plant_payload):
    client.post("/api/admin/plants", json=make_plant_payload())

    resp = client.get("/api/plant-groups/test-group/plants")

    assert resp.status_code == 200
    assert resp.json() == [{
        "id": "new-plant",
        "name": "Test Plant",
        "scientificName": "Testus plantus",
        "thumbnailId": catalog["thumbnail"],
    }]


def test_list_by_group_empty_and_unknown(client, catalog):
    assert client.get("/api/plant-groups/test-group/plants").json() == []
    assert client.get("/api/plant-groups/unknown/plants").status_code == 404


def test_admin_list_plants(client, make_plant_payload):
    client.post("/api/admin/plants", json=make_plant_payload("b-plant"))
    client.post("/api/admin/plants", json=make_plant_payload("a-plant"))

    resp = client.get("/api/admin/plants")

    assert resp.status_code == 200
    assert [p["id"] for p in resp.json()] == ["a-plant", "b-plant"]
    assert client.get("/api/admin/plants/a-plant").json()["id"] == "a-plant"


def test_delete_plant_removes_issues_and_gallery_rows(client, db, make_plant_payload):
    client.post("/api/admin/plants", json=make_plant_payload())
    client.post("/api/admin/plants", json=make_plant_payload("second-plant"))

    assert client.delete("/api/admin/plants/new-plant").status_code == 204

    assert db.query(Issue).filter(Issue.plant_id == "new-plant").count() == 0
    assert db.query(PlantImage).filter(PlantImage.plant_id == "new-plant").count() == 0
    assert db.query(Issue).filter(Issue.plant_id == "second-plant").count() == 2
    assert db.query(PlantImage).filter(PlantImage.plant_id == "second-plant").count() == 2


def test_rejected_create_leaves_no_child_rows(client, db, catalog, make_plant_payload):
    resp = client.post(
        "/api/admin/plants",
        json=make_plant_payload(imageIds=[catalog["image1"], "missing-image"]),
    )

    assert resp.status_code == 400
    assert db.query(Plant).count() == 0
    assert db.query(Issue).count() == 0
    assert db.query(PlantImage).count() == 0
