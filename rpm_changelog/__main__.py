from rpm_changelog.cli.app import main

main()
