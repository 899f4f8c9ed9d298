# tests/test_api/test_feedback_api.py

def test_save_and_list_feedback(client, sample_book, borrower, owner, as_user):
    response = client.post(
        "/feedbacks",
        json={"book_id": sample_book.id, "note": 4.5, "comment": "Beautiful"},
        headers=as_user(borrower)
    )
    assert response.status_code == 201

    response = client.get(f"/feedbacks/book/{sample_book.id}", headers=as_user(borrower))
    assert response.status_code == 200
    data = response.json()
    assert data["total_elements"] == 1
    assert data["content"][0]["comment"] == "Beautiful"
    assert data["content"][0]["own_feedback"] is True

    response = client.get(f"/feedbacks/book/{sample_book.id}", headers=as_user(owner))
    assert response.json()["content"][0]["own_feedback"] is False

def test_feedback_on_own_book(client, sample_book, owner, as_user):
    response = client.post(
        "/feedbacks",
        json={"book_id": sample_book.id, "note": 5, "comment": "Mine"},
        headers=as_user(owner)
    )
    assert response.status_code == 400

def test_feedback_note_out_of_range(client, sample_book, borrower, as_user):
    response = client.post(
        "/feedbacks",
        json={"book_id": sample_book.id, "note": 7, "comment": "Too high"},
        headers=as_user(borrower)
    )
    assert response.status_code == 422

def test_blank_comment_maps_to_422(client, sample_book, borrower, as_user):
    response = client.post(
        "/feedbacks",
        json={"book_id": sample_book.id, "note": 3, "comment": "   "},
        headers=as_user(borrower)
    )
    assert response.status_code == 422
    assert response.json()["detail"] == "Comment is required"
