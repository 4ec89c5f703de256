from app.seeders.cli import main

main()
