from quicknotes.server import main

main()
