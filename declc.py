import sys

from decl.tools     import Tools
from decl.reporter  import Reporter

def main(argv = None):
    """
    usage:
    python3 declc.py [input.txt] [-o output.txt] [--json result.json] [--pause]

    checks the declarations in the input file, prints the verdict and
    writes it to the output file
    returns 0 for a correct file, 1 otherwise
    """
    # preliminary objects
    reporter    = Reporter()
    tools       = Tools(reporter)

    # parse args
    reporter.checkpoint("parsing")
    args = tools.parseargs(argv)

    # file to result
    reporter.checkpoint("scanning")
    result = tools.analyze(args.input)

    # result to report
    reporter.checkpoint("report wr")
    reporter.report(result)
    tools.writereport(result, args.output)

    if args.json:
        reporter.checkpoint("json wr")
        tools.writejson(result.json(), args.json)

    reporter.checkpoint("end")

    if args.pause:
        reporter.pause()

    return 0 if result.success else 1


if __name__ == "__main__":
    sys.exit(main())
