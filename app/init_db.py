"""Create the blog tables directly, without Alembic (local development)."""

from app.database import Base, engine
import app.models  # registers every model on Base.metadata


def main():
    Base.metadata.create_all(bind=engine)
    print(f"✅ Blog tables ready: {', '.join(sorted(Base.metadata.tables))}")


if __name__ == "__main__":
    main()
