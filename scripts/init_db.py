from app.config import get_settings
from app.db.engine import build_engine
from app.db.schema import metadata

def main():
    settings = get_settings()
    engine = build_engine(settings)
    metadata.drop_all(engine)
    metadata.create_all(engine)
    print(f"DB schema created at {engine.url}.")

if __name__ == "__main__":
    main()
