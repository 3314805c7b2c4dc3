from relvars.cli.app import main

main()
