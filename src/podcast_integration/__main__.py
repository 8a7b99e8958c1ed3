from podcast_integration.main import main

main()
