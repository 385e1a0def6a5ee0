"""Built-in data: default endpoint, seed users and the avatar catalogue."""

DEFAULT_ENDPOINT = "http://localhost:4000/users"

# Written to an empty collection on first load
SEED_USERS: list[dict] = [
    {
        "id": 1,
        "name": "fabian franco",
        "email": "fabian@example.com",
        "password": "123456",
        "birthday": "1990-01-01",
        "img_url": "https://api.dicebear.com/7.x/bottts/svg?seed=John",
    },
    {
        "id": 2,
        "name": "jose rulo",
        "email": "rulo@example.com",
        "password": "abcdef",
        "birthday": "1995-05-15",
        "img_url": "https://api.dicebear.com/7.x/bottts/svg?seed=Jane",
    },
]

_AVATAR_BASE = "https://api.dicebear.com/7.x/avataaars/svg?seed="

AVATAR_SEEDS = [
    "Alexander",
    "Amelia",
    "Benjamin",
    "Charlotte",
    "Ethan",
    "Aurora",
    "Leonardo",
    "Isabella",
    "Mateo",
    "Valeria",
    "Julian",
    "Gabriela",
    "Nicolas",
    "Lucia",
    "Thiago",
    "Elena",
    "Adrian",
    "Valentina",
    "Samuel",
    "Camila",
    "Diego",
    "Martina",
    "Rafael",
    "Julieta",
    "Andres",
    "Florencia",
    "Sebastian",
    "Paula",
    "Daniel",
    "Victoria",
]

AVATAR_OPTIONS = [f"{_AVATAR_BASE}{seed}" for seed in AVATAR_SEEDS]
