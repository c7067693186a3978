import argparse
import json
import os
import sys
from typing import List

from pymongo import MongoClient
from pymongo.errors import PyMongoError

from movie_catalog.domain.exceptions import ValidationError
from movie_catalog.domain.models.movie import Movie, is_valid_movie_id
from movie_catalog.infrastructure.persistence.database import MOVIES_COLLECTION


def read_movies(path: str) -> List[Movie]:
    with open(path, encoding="utf-8") as f:
        rows = json.load(f)

    movies = []
    for row in rows:
        try:
            movie_id = int(row["id"])
            if not is_valid_movie_id(movie_id):
                raise ValidationError(f"invalid movie ID: {movie_id}")
            movies.append(Movie.new(movie_id, str(row["title"]), str(row["year"])))
        except (KeyError, TypeError, ValueError, ValidationError) as e:
            print(f"Skipping invalid movie {row}: {e}", file=sys.stderr)
    return movies


def insert_movies(mongodb_uri: str, database_name: str, movies: List[Movie], timeout: float) -> int:
    client = MongoClient(mongodb_uri, serverSelectionTimeoutMS=int(timeout * 1000))
    try:
        client.admin.command("ping")
        collection = client[database_name][MOVIES_COLLECTION]

        existing = collection.count_documents({})
        if existing > 0:
            print(f"Database already contains {existing} movies. Skipping initialization.")
            return 0

        if not movies:
            return 0

        documents = [{"_id": movie.id, "title": movie.title, "year": movie.year} for movie in movies]
        result = collection.insert_many(documents, ordered=False)
        return len(result.inserted_ids)
    finally:
        client.close()


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed the movies collection from a JSON file")
    parser.add_argument("--mongodb_uri", type=str, default=os.getenv("MONGODB_URI", "mongodb://localhost:27017"))
    parser.add_argument("--database_name", type=str, default=os.getenv("DATABASE_NAME", "movies_db"))
    parser.add_argument("--movies_path", type=str, default="data/movies.json")
    parser.add_argument("--timeout", type=float, default=30.0)
    args = parser.parse_args()

    try:
        movies = read_movies(args.movies_path)
    except (OSError, ValueError) as e:
        print(f"Failed to read movies: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"Loaded {len(movies)} movies from {args.movies_path}")

    try:
        inserted = insert_movies(args.mongodb_uri, args.database_name, movies, args.timeout)
    except PyMongoError as e:
        print(f"Failed to seed movies: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"Inserted {inserted} movies")


if __name__ == "__main__":
    main()
