from app.services.trainers import seed_default_trainers

from conftest import register


def test_list_and_filter_trainers(client, store):
    seed_default_trainers(store.trainers)

    everyone = client.get("/trainers").json()
    in_badajoz = client.get("/trainers", params={"location": "Badajoz"}).json()
    cheap = client.get("/trainers", params={"maxPrice": 32}).json()

    assert everyone["success"] is True
    assert len(everyone["trainers"]) == 6
    assert {t["name"] for t in in_badajoz["trainers"]} == {"María González", "David López"}
    assert all(t["pricePerSession"] <= 32 for t in cheap["trainers"])
    assert len(cheap["trainers"]) == 2


def test_get_unknown_trainer(client):
    response = client.get("/trainers/unknown")

    assert response.status_code == 404
    assert response.json() == {"success": False, "error": "Trainer not found"}


def test_trainer_updates_own_profile(client):
    trainer, headers = register(client, "Pablo Ruiz", "pablo@example.com", role="trainer")
    profile = {
        "name": "Pablo Ruiz",
        "specialties": ["Running", "Strength"],
        "location": "Mérida",
        "pricePerSession": 28,
        "experienceYears": 6,
        "bio": "Endurance and strength coach for amateur runners.",
    }

    response = client.put("/trainers/me", json=profile, headers=headers)

    assert response.status_code == 200
    trainer_profile = response.json()["trainer"]
    assert trainer_profile["id"] == trainer["id"]
    assert trainer_profile["location"] == "Mérida"
    found = client.get("/trainers", params={"q": "running"}).json()["trainers"]
    assert [t["id"] for t in found] == [trainer["id"]]


def test_profile_validation_and_role(client):
    _, trainer_headers = register(client, "Pablo Ruiz", "pablo@example.com", role="trainer")
    _, client_headers = register(client, "Lucia Gomez", "lucia@example.com")
    profile = {
        "name": "Pablo Ruiz",
        "specialties": ["Running"],
        "location": "Mérida",
        "pricePerSession": 500,
        "experienceYears": 6,
        "bio": "Endurance and strength coach for amateur runners.",
    }

    too_expensive = client.put("/trainers/me", json=profile, headers=trainer_headers)
    not_trainer = client.put(
        "/trainers/me", json={**profile, "pricePerSession": 30}, headers=client_headers
    )

    assert too_expensive.status_code == 400
    assert not_trainer.status_code == 403
