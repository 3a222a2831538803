"""
Tests for Books API Endpoints

Tests for /api/v1/books CRUD endpoints. Search lives in test_search.py.
"""

from fastapi import status

from tests.conftest import API


class TestGetBook:
    """Tests for GET /api/v1/books/{book_id} endpoint."""

    def test_get_book_success(self, client, sample_book):
        """Test getting a book by ID."""
        response = client.get(f"{API}/books/{sample_book.id}")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["id"] == sample_book.id
        assert data["title"] == "One Hundred Years of Solitude"
        assert data["isbn"] == "978-0060883287"
        assert data["publishedYear"] == 1967
        assert data["pages"] == 417

    def test_get_book_includes_author(self, client, sample_book):
        """The owning author is embedded in the response."""
        data = client.get(f"{API}/books/{sample_book.id}").json()

        assert data["authorId"] == sample_book.author_id
        assert data["author"]["id"] == sample_book.author_id
        assert data["author"]["name"] == "Gabriel Garcia Marquez"
        assert data["author"]["nationality"] == "Colombian"

    def test_get_book_not_found(self, client):
        """Test getting a non-existent book returns 404."""
        response = client.get(f"{API}/books/99999")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"error": "Book with id 99999 not found"}


class TestCreateBook:
    """Tests for POST /api/v1/books endpoint."""

    def test_create_book_success(self, client, sample_author):
        """Test creating a book with valid data."""
        book_data = {
            "title": "Love in the Time of Cholera",
            "publishedYear": 1985,
            "genre": "Romance",
            "pages": 348,
            "authorId": sample_author.id,
        }

        response = client.post(f"{API}/books", json=book_data)

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["title"] == "Love in the Time of Cholera"
        assert data["authorId"] == sample_author.id
        assert data["author"]["name"] == "Gabriel Garcia Marquez"
        assert data["description"] is None
        assert "id" in data
        assert "createdAt" in data

    def test_create_book_minimal(self, client, sample_author):
        """Only title and authorId are required."""
        response = client.post(
            f"{API}/books",
            json={"title": "Leaf Storm", "authorId": sample_author.id},
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["pages"] is None
        assert data["publishedYear"] is None

    def test_create_book_strips_title(self, client, sample_author):
        """Surrounding whitespace is removed from the title."""
        response = client.post(
            f"{API}/books",
            json={"title": "  Leaf Storm  ", "authorId": sample_author.id},
        )

        assert response.json()["title"] == "Leaf Storm"

    def test_create_book_unknown_author(self, client):
        """An authorId with no author is a 400, not a 404."""
        response = client.post(
            f"{API}/books",
            json={"title": "Orphan", "authorId": 99999},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"error": "Author with id 99999 not found"}

    def test_create_book_missing_author(self, client):
        """authorId is required."""
        response = client.post(f"{API}/books", json={"title": "Orphan"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "authorId" in response.json()["error"]

    def test_create_book_empty_title(self, client, sample_author):
        """Test that a whitespace title is rejected."""
        response = client.post(
            f"{API}/books",
            json={"title": "   ", "authorId": sample_author.id},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_create_book_non_positive_pages(self, client, sample_author):
        """Page count must be positive when given."""
        for pages in (0, -5):
            response = client.post(
                f"{API}/books",
                json={"title": "Thin", "pages": pages, "authorId": sample_author.id},
            )
            assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_create_book_malformed_json(self, client):
        """A body that is not JSON is a 400."""
        response = client.post(
            f"{API}/books",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "error" in response.json()


class TestUpdateBook:
    """Tests for PUT /api/v1/books/{book_id} endpoint."""

    def test_update_book_partial(self, client, sample_book):
        """Only the fields sent are changed."""
        response = client.put(
            f"{API}/books/{sample_book.id}",
            json={"pages": 450, "genre": "Classic"},
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["pages"] == 450
        assert data["genre"] == "Classic"
        assert data["title"] == "One Hundred Years of Solitude"
        assert data["publishedYear"] == 1967

    def test_update_book_move_to_other_author(self, client, sample_book, second_author):
        """A book can be reassigned to another existing author."""
        response = client.put(
            f"{API}/books/{sample_book.id}",
            json={"authorId": second_author.id},
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["authorId"] == second_author.id
        assert data["author"]["name"] == "Jorge Luis Borges"

    def test_update_book_unknown_author(self, client, sample_book):
        """Reassigning to an author that does not exist is a 400."""
        response = client.put(
            f"{API}/books/{sample_book.id}",
            json={"authorId": 99999},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

        unchanged = client.get(f"{API}/books/{sample_book.id}").json()
        assert unchanged["authorId"] == sample_book.author_id

    def test_update_book_null_title(self, client, sample_book):
        """Title may be omitted but not set to null."""
        response = client.put(
            f"{API}/books/{sample_book.id}",
            json={"title": None},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_update_book_invalid_pages(self, client, sample_book):
        """Test that a non-positive page count is rejected on update."""
        response = client.put(
            f"{API}/books/{sample_book.id}",
            json={"pages": 0},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_update_book_not_found(self, client):
        """Test updating a non-existent book returns 404."""
        response = client.put(f"{API}/books/99999", json={"title": "Updated"})

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestDeleteBook:
    """Tests for DELETE /api/v1/books/{book_id} endpoint."""

    def test_delete_book_success(self, client, sample_book):
        """Test deleting a book successfully."""
        book_id = sample_book.id

        response = client.delete(f"{API}/books/{book_id}")

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert response.content == b""

        get_response = client.get(f"{API}/books/{book_id}")
        assert get_response.status_code == status.HTTP_404_NOT_FOUND

    def test_delete_book_keeps_author(self, client, sample_book):
        """Deleting a book leaves its author in place."""
        book_id, author_id = sample_book.id, sample_book.author_id

        client.delete(f"{API}/books/{book_id}")

        response = client.get(f"{API}/authors/{author_id}")
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["books"] == []

    def test_delete_book_not_found(self, client):
        """Test deleting a non-existent book returns 404."""
        response = client.delete(f"{API}/books/99999")

        assert response.status_code == status.HTTP_404_NOT_FOUND
