import dash
from dash import html, dcc, Input, Output
import dash_bootstrap_components as dbc
import plotly.graph_objs as go
import plotly.express as px
import numpy as np
import pandas as pd
from dash.exceptions import PreventUpdate
from base64 import b64decode
import io

from odd_even import EVEN, ODD, LABELS, INVALID_INPUT_MESSAGE, describe_number


# Constants
RANGE_MIN, RANGE_MAX = -50, 50
DEFAULT_RANGE = [-10, 10]
PARITY_COLORS = {EVEN: '#1f77b4', ODD: '#ff7f0e'}
CHECK_HINT = "Type a whole number to see whether it is even or odd."
PORT = 8050
# number inputs arrive as JS doubles, exact only below 2**53
MAX_EXACT_INPUT = 2**53

app = dash.Dash(__name__, external_stylesheets=[dbc.themes.BOOTSTRAP])


def classify_many(numbers):
    """Label every integer in ``numbers``, keeping the input's shape."""
    values = np.asarray(numbers)
    return np.where(values % 2 == 0, EVEN, ODD)


def parity_table(start, stop):
    numbers = np.arange(start, stop, dtype=np.int64)
    return pd.DataFrame({'number': numbers, 'parity': classify_many(numbers)})


def label_counts(labels):
    labels = np.asarray(labels)
    return {label: int((labels == label).sum()) for label in LABELS}


def parity_counts(frame):
    return label_counts(frame['parity'])


def create_empty_figure(title):
    fig = go.Figure()
    fig.update_layout(title=title, xaxis={'visible': False}, yaxis={'visible': False})
    return fig


def create_distribution_figure(start, stop):
    df = parity_table(start, stop)
    if df.empty:
        return create_empty_figure('No numbers in range')

    fig = px.scatter(df, x='number', y='parity',
                     color='parity',
                     color_discrete_map=PARITY_COLORS,
                     category_orders={'parity': list(LABELS)},
                     title=f'Parity of {start} to {stop - 1}')

    # Count per label, pinned to the right edge of the plot
    for label, count in parity_counts(df).items():
        fig.add_annotation(
            x=1.0, xref='paper', xanchor='left',
            y=label,
            text=f'{label}<br>Count: {count}',
            showarrow=False
        )

    return fig


def parse_csv(contents):
    content_type, content_string = contents.split(',', 1)
    decoded = b64decode(content_string)
    df = pd.read_csv(io.StringIO(decoded.decode('utf-8')))

    integer_cols = set(df.select_dtypes(include=[np.integer]).columns)
    # ints beyond uint64 are read as text
    for column in df.select_dtypes(include=['object']).columns:
        try:
            df[column] = df[column].map(int)
        except (ValueError, TypeError):
            continue
        integer_cols.add(column)

    if not integer_cols:
        raise ValueError("The uploaded file has no integer columns.")
    return df[[column for column in df.columns if column in integer_cols]]


def create_upload_figure(data):
    columns = list(data.columns)
    counts = {column: label_counts(classify_many(data[column].to_numpy()))
              for column in columns}

    fig = go.Figure()
    for label in LABELS:
        fig.add_trace(go.Bar(
            name=label,
            x=columns,
            y=[counts[column][label] for column in columns],
            marker_color=PARITY_COLORS[label]
        ))
    fig.update_layout(barmode='stack', title='Parity of Uploaded Columns')
    return fig


app.layout = html.Div([
    html.H1("Even or Odd - Interactive Parity Checker",
            style={'textAlign': 'center', 'padding': '20px'}),

    dcc.Tabs([
        dcc.Tab(label='Check a Number', children=[
            html.Div([
                html.H3("Single Number"),
                dbc.Input(id='number-input', type='number',
                          placeholder='Enter a number',
                          style={'width': '30%'}),
                html.H4(id='number-label', children=CHECK_HINT,
                        style={'marginTop': '20px'})
            ], style={'padding': '20px'})
        ]),

        dcc.Tab(label='Parity Distribution', children=[
            html.Div([
                html.H3("Parity Across a Range"),
                html.Div([
                    html.Label('Range:'),
                    dcc.RangeSlider(
                        id='range-slider',
                        min=RANGE_MIN, max=RANGE_MAX, step=1,
                        value=DEFAULT_RANGE,
                        marks={i: str(i) for i in range(RANGE_MIN, RANGE_MAX + 1, 10)}
                    ),
                ], style={'width': '50%', 'margin': '20px auto'}),
                dcc.Graph(id='distribution-graph')
            ])
        ]),

        dcc.Tab(label='CSV Upload', children=[
            html.Div([
                html.H3("Classify Integer Columns"),
                dcc.Upload(
                    id='upload-data',
                    children=html.Div(['Drag and Drop or Click to Upload CSV']),
                    style={
                        'width': '100%',
                        'height': '60px',
                        'lineHeight': '60px',
                        'borderWidth': '1px',
                        'borderStyle': 'dashed',
                        'borderRadius': '5px',
                        'textAlign': 'center',
                        'margin': '10px'
                    }
                ),
                dcc.Graph(id='upload-graph')
            ])
        ])
    ])
])


@app.callback(
    Output('number-label', 'children'),
    [Input('number-input', 'value')]
)
def update_label(value):
    if value is None:
        return CHECK_HINT
    if isinstance(value, float):
        if not value.is_integer():
            return INVALID_INPUT_MESSAGE
        value = int(value)
    if abs(value) >= MAX_EXACT_INPUT:
        return INVALID_INPUT_MESSAGE
    return describe_number(value)


@app.callback(
    Output('distribution-graph', 'figure'),
    [Input('range-slider', 'value')]
)
def update_distribution(bounds):
    start, end = bounds
    # slider bounds are inclusive
    return create_distribution_figure(start, end + 1)


@app.callback(
    Output('upload-graph', 'figure'),
    [Input('upload-data', 'contents')]
)
def update_upload(contents):
    if contents is None:
        raise PreventUpdate
    try:
        data = parse_csv(contents)
    except ValueError as e:
        return create_empty_figure(str(e))
    return create_upload_figure(data)


if __name__ == '__main__':
    app.run(debug=True, port=PORT)
