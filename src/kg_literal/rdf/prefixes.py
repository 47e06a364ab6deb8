from kg_literal.config.settings import settings
from kg_literal.rdf.namespace import Graph, Namespace

LOG_TARGET_CONFIG = "config"
LOG_TARGET_SPARQL = "sparql"
LOG_TARGET_FILES = "files"
LOG_TARGET_DATABASE = "database"

DEFAULT_BASE_IRI = settings.default_base_iri

# Formats accepted by the database, see
# https://docs.oxfordsemantic.tech/5.6/programmatic-access-APIs.html#formats-encoding-sparql-query-results
TEXT_TSV = "text/tab-separated-values"
TEXT_CSV = "text/csv"
TEXT_X_CSV_ABBREV = "text/x.csv-abbrev"
TEXT_TURTLE = "text/turtle"
TEXT_OWL_FUNCTIONAL = "text/owl-functional"
TEXT_X_TAB_SEPARATED_VALUES_ABBREV = "text/x.tab-separated-values-abbrev"
APPLICATION_TRIG = "application/trig"
APPLICATION_N_QUADS = "application/n-quads"
APPLICATION_N_TRIPLES = "application/n-triples"
APPLICATION_X_DATALOG = "application/x.datalog"
APPLICATION_SPARQL_RESULTS_XML = "application/sparql-results+xml"
APPLICATION_SPARQL_RESULTS_JSON = "application/sparql-results+json"
APPLICATION_SPARQL_RESULTS_TURTLE = "application/sparql-results+turtle"
APPLICATION_X_SPARQL_RESULTS_XML_ABBREV = "application/x.sparql-results+xml-abbrev"
APPLICATION_X_SPARQL_RESULTS_JSON_ABBREV = "application/x.sparql-results+json-abbrev"
APPLICATION_X_SPARQL_RESULTS_TURTLE_ABBREV = "application/x.sparql-results+turtle-abbrev"
APPLICATION_X_SPARQL_RESULTS_RESOURCEID = "application/x.sparql-results+resourceid"
APPLICATION_X_SPARQL_RESULTS_NULL = "application/x.sparql-results+null"

SUPPORTED_MIME_TYPES = frozenset(
    {
        TEXT_TSV,
        TEXT_CSV,
        TEXT_X_CSV_ABBREV,
        TEXT_TURTLE,
        TEXT_OWL_FUNCTIONAL,
        TEXT_X_TAB_SEPARATED_VALUES_ABBREV,
        APPLICATION_TRIG,
        APPLICATION_N_QUADS,
        APPLICATION_N_TRIPLES,
        APPLICATION_X_DATALOG,
        APPLICATION_SPARQL_RESULTS_XML,
        APPLICATION_SPARQL_RESULTS_JSON,
        APPLICATION_SPARQL_RESULTS_TURTLE,
        APPLICATION_X_SPARQL_RESULTS_XML_ABBREV,
        APPLICATION_X_SPARQL_RESULTS_JSON_ABBREV,
        APPLICATION_X_SPARQL_RESULTS_TURTLE_ABBREV,
        APPLICATION_X_SPARQL_RESULTS_RESOURCEID,
        APPLICATION_X_SPARQL_RESULTS_NULL,
    }
)

PREFIX_DCAT = Namespace.declare("dcat:", "http://www.w3.org/ns/dcat#")
PREFIX_OWL = Namespace.declare("owl:", "http://www.w3.org/2002/07/owl#")
PREFIX_RDF = Namespace.declare("rdf:", "http://www.w3.org/1999/02/22-rdf-syntax-ns#")
PREFIX_RDFS = Namespace.declare("rdfs:", "http://www.w3.org/2000/01/rdf-schema#")
PREFIX_SKOS = Namespace.declare("skos:", "http://www.w3.org/2004/02/skos/core#")
PREFIX_XSD = Namespace.declare("xsd:", "http://www.w3.org/2001/XMLSchema#")
PREFIX_RDFOX = Namespace.declare("rdfox:", "http://oxfordsemantic.tech/RDFox#")

PREFIXES = (
    PREFIX_DCAT,
    PREFIX_OWL,
    PREFIX_RDF,
    PREFIX_RDFS,
    PREFIX_SKOS,
    PREFIX_XSD,
    PREFIX_RDFOX,
)

TURTLE_PREFIXES = "".join(
    f"@prefix {prefix.name} <{prefix.iri}> .\n" for prefix in PREFIXES
)

DEFAULT_GRAPH_RDFOX = Graph.declare(PREFIX_RDFOX, "DefaultTriples")
