from template_setup.pipeline import main

main()
