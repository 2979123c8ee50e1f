from annorder.cli import main

main()
