from iptreport.main import main

if __name__ == "__main__":
    # Same as `python -m iptreport.main`; reads ipts.ini from the working
    # directory unless --file is given.
    raise SystemExit(main())
