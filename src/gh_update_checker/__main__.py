from gh_update_checker.cli.app import main

main()
