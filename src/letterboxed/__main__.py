from letterboxed import main

main()
