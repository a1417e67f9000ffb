"""Assignment endpoints: the caller's assignments, saving answers, per-pair tallies."""

OTHER_USER_ID = 2


async def test_lists_only_callers_assignments_in_id_order(client, users, seed):
    experiment = await seed.experiment()
    p1 = await seed.file_pair(experiment, 1)
    p2 = await seed.file_pair(experiment, 2)
    a1 = await seed.assignment(experiment, p1, answer="yes", duration=900)
    a2 = await seed.assignment(experiment, p2)
    await seed.assignment(experiment, p1, user_id=OTHER_USER_ID, answer="no")

    res = await client.get(f"/api/v1/experiments/{experiment.id}/assignments")
    assert res.status_code == 200
    assert res.json()["data"] == [
        {
            "id": a1.id, "userId": 1, "pairId": p1.id,
            "experimentId": experiment.id, "answer": "yes", "duration": 900,
        },
        {
            "id": a2.id, "userId": 1, "pairId": p2.id,
            "experimentId": experiment.id, "answer": None, "duration": 0,
        },
    ]


async def test_assignments_of_missing_experiment_is_404(client):
    res = await client.get("/api/v1/experiments/77/assignments")
    assert res.status_code == 404


async def test_assignments_require_identity(anon_client, seed):
    experiment = await seed.experiment()
    res = await anon_client.get(f"/api/v1/experiments/{experiment.id}/assignments")
    assert res.status_code == 401


async def test_save_answer_is_204_and_moves_progress(client, users, seed):
    experiment = await seed.experiment()
    p1 = await seed.file_pair(experiment, 1)
    p2 = await seed.file_pair(experiment, 2)
    a1 = await seed.assignment(experiment, p1)
    await seed.assignment(experiment, p2)

    res = await client.put(
        f"/api/v1/experiments/{experiment.id}/assignments/{a1.id}",
        json={"answer": "yes", "duration": 4200},
    )
    assert res.status_code == 204
    assert res.content == b""

    res = await client.get(f"/api/v1/experiments/{experiment.id}")
    assert res.json()["data"]["progress"] == 50.0

    res = await client.get(f"/api/v1/experiments/{experiment.id}/assignments")
    saved = next(a for a in res.json()["data"] if a["id"] == a1.id)
    assert saved["answer"] == "yes"
    assert saved["duration"] == 4200


async def test_save_invalid_answer_is_400_and_keeps_row(client, users, seed):
    experiment = await seed.experiment()
    pair = await seed.file_pair(experiment)
    assignment = await seed.assignment(experiment, pair)

    res = await client.put(
        f"/api/v1/experiments/{experiment.id}/assignments/{assignment.id}",
        json={"answer": "perhaps"},
    )
    assert res.status_code == 400
    assert res.json()["errors"][0]["title"].startswith("invalid request body")

    res = await client.get(f"/api/v1/experiments/{experiment.id}")
    assert res.json()["data"]["progress"] == 0


async def test_save_someone_elses_assignment_is_404(client, users, seed):
    experiment = await seed.experiment()
    pair = await seed.file_pair(experiment)
    theirs = await seed.assignment(experiment, pair, user_id=OTHER_USER_ID)

    res = await client.put(
        f"/api/v1/experiments/{experiment.id}/assignments/{theirs.id}",
        json={"answer": "no"},
    )
    assert res.status_code == 404
    assert res.json()["errors"][0]["title"] == "no assignment found"


async def test_save_assignment_of_other_experiment_is_404(client, users, seed):
    experiment = await seed.experiment()
    other = await seed.experiment(name="other")
    pair = await seed.file_pair(experiment)
    assignment = await seed.assignment(experiment, pair)

    res = await client.put(
        f"/api/v1/experiments/{other.id}/assignments/{assignment.id}",
        json={"answer": "no"},
    )
    assert res.status_code == 404


async def test_save_with_non_integer_assignment_id_is_400(client, seed):
    experiment = await seed.experiment()
    res = await client.put(
        f"/api/v1/experiments/{experiment.id}/assignments/first",
        json={"answer": "no"},
    )
    assert res.status_code == 400


async def test_file_pair_annotations_tally_all_users(client, users, seed):
    experiment = await seed.experiment()
    pair = await seed.file_pair(experiment, 1)
    other_pair = await seed.file_pair(experiment, 2)
    await seed.assignment(experiment, pair, answer="yes")
    await seed.assignment(experiment, pair, user_id=OTHER_USER_ID)
    await seed.assignment(experiment, other_pair, answer="no")

    res = await client.get(
        f"/api/v1/experiments/{experiment.id}/file-pairs/{pair.id}/annotations",
    )
    assert res.status_code == 200
    assert res.json()["data"] == {
        "yes": 1, "maybe": 0, "no": 0, "skip": 0, "unanswered": 1, "total": 2,
    }


async def test_file_pair_annotations_of_missing_experiment_is_404(client):
    res = await client.get("/api/v1/experiments/5/file-pairs/1/annotations")
    assert res.status_code == 404
