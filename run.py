from dotenv import load_dotenv
from game_suggester import create_app

# Load STEAM_API_KEY / STEAM_ID64 from .env before the config is built
load_dotenv()

app = create_app()

if __name__ == "__main__":
    app.run(debug=True)
